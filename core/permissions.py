"""
permissions.py — Role Rules for Reports and Profiles
-----------------------------------------------------

Application-side version of the access rules:

* Anyone, signed in or anonymous, may submit and read reports
* Rangers and admins may update report status and feedback
* Only admins may delete reports, list every profile, or delete users
* A user may read their own profile

`actor` is the signed-in `UserProfile` (or anything with `id` and
`user_type`), or None for anonymous visitors.
"""

from core.exception import PermissionDenied

REVIEWER_ROLES = ("ranger", "admin")
ADMIN_ROLES = ("admin",)


def role_of(actor) -> str:
    return getattr(actor, "user_type", None) or "anonymous"


def require_role(actor, roles, action: str) -> None:
    if role_of(actor) not in roles:
        raise PermissionDenied(f"{role_of(actor).capitalize()} users cannot {action}.")


def require_reviewer(actor) -> None:
    require_role(actor, REVIEWER_ROLES, "update reports")


def require_admin(actor, action: str = "perform admin actions") -> None:
    require_role(actor, ADMIN_ROLES, action)


def require_self_or_admin(actor, user_id: str) -> None:
    if actor is not None and (getattr(actor, "id", None) == user_id or role_of(actor) in ADMIN_ROLES):
        return
    raise PermissionDenied("You can only view your own profile.")
