"""
Local Auth Provider

Cookie-session identity provider backed by the accounts and auth_sessions
tables. The access cookie is a short-lived JWT; the refresh cookie is
"<session_id>.<secret>" and rotates every time it is used.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Tuple
from uuid import UUID

import bcrypt

from config import ApplicationConfig
from workspace_service.api.utils.jwt import generate_jwt, verify_jwt
from workspace_service.app.repositories.errors import ConflictError
from workspace_service.app.services.auth_provider import (
    AuthSessionIssued,
    AuthUser,
    CookieToSet,
    IAuthProvider,
    SessionLookup,
    SignUpOutcome,
)
from workspace_service.app.services.unit_of_work import UnitOfWork
from workspace_service.domain.entities import Account, AuthSession, Profile
from workspace_service.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 12


def _hash_secret(secret: str) -> str:
    return bcrypt.hashpw(secret.encode(), bcrypt.gensalt(BCRYPT_ROUNDS)).decode()


def _check_secret(secret: str, hashed: str) -> bool:
    return bcrypt.checkpw(secret.encode(), hashed.encode())


def parse_refresh_token(token: Optional[str]) -> Optional[Tuple[UUID, str]]:
    """Split a refresh cookie into (session_id, secret), None when malformed"""
    if not token or "." not in token:
        return None
    session_part, secret = token.split(".", 1)
    if not secret:
        return None
    try:
        return UUID(session_part), secret
    except ValueError:
        return None


class LocalAuthProvider(IAuthProvider):
    """
    Auth provider implemented on the local database.

    Business Rules:
    - Passwords and refresh secrets are stored as bcrypt hashes (cost 12)
    - A valid access cookie authenticates without touching the database
    - An invalid or expired access cookie falls back to the refresh cookie,
      which rotates the session and re-issues both cookies
    - A rejected refresh cookie clears both cookies
    - New accounts need email confirmation when REQUIRE_EMAIL_CONFIRMATION
      is on; the confirmation link is logged
    - With AUTO_CREATE_PROFILE on, the profile row is created at sign-up
    """

    def __init__(self, uow: UnitOfWork, config=ApplicationConfig):
        self.uow = uow
        self.config = config

    # Cookies

    def _cookie(self, name: str, value: str, max_age: int) -> CookieToSet:
        return CookieToSet(
            name=name, value=value, max_age=max_age, secure=self.config.COOKIE_SECURE
        )

    def _session_cookies(
        self, user_id: UUID, email: str, session_id: UUID, secret: str
    ) -> List[CookieToSet]:
        return [
            self._cookie(
                self.config.ACCESS_COOKIE_NAME,
                generate_jwt(user_id, email, session_id),
                self.config.ACCESS_TOKEN_TTL_MINUTES * 60,
            ),
            self._cookie(
                self.config.REFRESH_COOKIE_NAME,
                f"{session_id}.{secret}",
                self.config.SESSION_TTL_DAYS * 24 * 3600,
            ),
        ]

    def _cleared_cookies(self) -> List[CookieToSet]:
        return [
            self._cookie(self.config.ACCESS_COOKIE_NAME, "", 0),
            self._cookie(self.config.REFRESH_COOKIE_NAME, "", 0),
        ]

    async def _issue_session(self, account: Account) -> AuthSessionIssued:
        """Create a session row for the account; caller commits"""
        secret = secrets.token_urlsafe(32)
        session_obj = AuthSession(
            user_id=account.id,
            refresh_token_hash=_hash_secret(secret),
            expires_at=datetime.utcnow() + timedelta(days=self.config.SESSION_TTL_DAYS),
        )
        session_obj = await self.uow.sessions.create(session_obj)
        return AuthSessionIssued(
            user=AuthUser(id=account.id, email=account.email),
            cookies_to_set=self._session_cookies(
                account.id, account.email, session_obj.id, secret
            ),
        )

    # IAuthProvider

    async def get_user(self, cookies: Dict[str, str]) -> SessionLookup:
        access_token = cookies.get(self.config.ACCESS_COOKIE_NAME)
        refresh_token = cookies.get(self.config.REFRESH_COOKIE_NAME)

        if access_token:
            payload = verify_jwt(access_token)
            if payload is not None:
                try:
                    user = AuthUser(id=UUID(payload["sub"]), email=payload["email"])
                except (KeyError, ValueError):
                    user = None
                if user is not None:
                    return SessionLookup(user=user)

        if not refresh_token:
            if access_token:
                return SessionLookup(cookies_to_set=self._cleared_cookies())
            return SessionLookup()

        parsed = parse_refresh_token(refresh_token)
        if parsed is None:
            logger.info("Malformed refresh cookie, clearing session")
            return SessionLookup(cookies_to_set=self._cleared_cookies())
        session_id, secret = parsed

        async with self.uow:
            session_obj = await self.uow.sessions.get_by_id(session_id)
            if (
                session_obj is None
                or session_obj.revoked
                or session_obj.expires_at <= datetime.utcnow()
                or not _check_secret(secret, session_obj.refresh_token_hash)
            ):
                logger.info("Refresh rejected for session %s", session_id)
                return SessionLookup(cookies_to_set=self._cleared_cookies())

            account = await self.uow.accounts.get_by_id(session_obj.user_id)
            if account is None:
                return SessionLookup(cookies_to_set=self._cleared_cookies())

            new_secret = secrets.token_urlsafe(32)
            session_obj.refresh_token_hash = _hash_secret(new_secret)
            session_obj.expires_at = datetime.utcnow() + timedelta(
                days=self.config.SESSION_TTL_DAYS
            )
            await self.uow.sessions.update(session_obj)

            user = AuthUser(id=account.id, email=account.email)
            cookies_to_set = self._session_cookies(
                account.id, account.email, session_id, new_secret
            )
            await self.uow.commit()

        logger.debug("Session %s refreshed", session_id)
        return SessionLookup(user=user, cookies_to_set=cookies_to_set)

    async def sign_up(
        self, email: str, password: str, full_name: str
    ) -> Result[SignUpOutcome]:
        email_taken = Error("EMAIL_ALREADY_EXISTS", "User already registered")
        require_confirmation = self.config.REQUIRE_EMAIL_CONFIRMATION

        async with self.uow:
            if await self.uow.accounts.get_by_email(email) is not None:
                return Return.err(email_taken)

            account = Account(
                email=email,
                password_hash=_hash_secret(password),
                email_confirmed=not require_confirmation,
            )
            confirmation_code = None
            if require_confirmation:
                confirmation_code = secrets.token_urlsafe(32)
                account.confirmation_code = confirmation_code
                account.confirmation_expires_at = datetime.utcnow() + timedelta(
                    hours=self.config.CONFIRMATION_TTL_HOURS
                )

            try:
                account = await self.uow.accounts.create(account)
            except ConflictError:
                await self.uow.rollback()
                return Return.err(email_taken)

            user = AuthUser(id=account.id, email=account.email)

            if self.config.AUTO_CREATE_PROFILE:
                await self.uow.profiles.create(
                    Profile(id=account.id, email=account.email, full_name=full_name)
                )

            session = None
            if not require_confirmation:
                account.last_sign_in_at = datetime.utcnow()
                session = await self._issue_session(account)

            await self.uow.commit()

        if confirmation_code is not None:
            logger.info(
                "Confirmation link for %s: %s/auth/callback?code=%s",
                user.email,
                self.config.SITE_URL,
                confirmation_code,
            )

        return Return.ok(
            SignUpOutcome(
                user=user, session=session, confirmation_required=require_confirmation
            )
        )

    async def sign_in_with_password(
        self, email: str, password: str
    ) -> Result[AuthSessionIssued]:
        async with self.uow:
            account = await self.uow.accounts.get_by_email(email)
            if account is None or not _check_secret(password, account.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid login credentials")
                )

            if not account.email_confirmed:
                return Return.err(Error("EMAIL_NOT_CONFIRMED", "Email not confirmed"))

            account.last_sign_in_at = datetime.utcnow()
            await self.uow.accounts.update(account)
            issued = await self._issue_session(account)
            await self.uow.commit()

        return Return.ok(issued)

    async def exchange_code_for_session(self, code: str) -> Result[AuthSessionIssued]:
        async with self.uow:
            account = await self.uow.accounts.get_by_confirmation_code(code)
            if account is None:
                return Return.err(Error("INVALID_CODE", "Invalid or used code"))

            if (
                account.confirmation_expires_at is not None
                and account.confirmation_expires_at <= datetime.utcnow()
            ):
                return Return.err(Error("CODE_EXPIRED", "Code has expired"))

            account.email_confirmed = True
            account.confirmation_code = None
            account.confirmation_expires_at = None
            account.last_sign_in_at = datetime.utcnow()
            await self.uow.accounts.update(account)
            issued = await self._issue_session(account)
            await self.uow.commit()

        logger.info("Email confirmed for account %s", issued.user.id)
        return Return.ok(issued)

    async def sign_out(self, cookies: Dict[str, str]) -> List[CookieToSet]:
        parsed = parse_refresh_token(cookies.get(self.config.REFRESH_COOKIE_NAME))
        if parsed is not None:
            session_id, secret = parsed
            async with self.uow:
                session_obj = await self.uow.sessions.get_by_id(session_id)
                if (
                    session_obj is not None
                    and not session_obj.revoked
                    and _check_secret(secret, session_obj.refresh_token_hash)
                ):
                    session_obj.revoked = True
                    session_obj.revoked_at = datetime.utcnow()
                    await self.uow.sessions.update(session_obj)
                    await self.uow.commit()
        return self._cleared_cookies()
