"""
Use Cases

Organized into domain folders:
- auth/: Sign up, login, sign out, confirmation callback
- invites/: Invite code lifecycle
- workspaces/: Workspace creation and membership
- profiles/: Profile bootstrap and onboarding state
"""
