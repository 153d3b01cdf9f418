"""teamroles - role assignment and resolution for team memberships."""

__version__ = "0.1.0"
