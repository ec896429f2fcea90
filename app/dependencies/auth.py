"""
Authentication and authorization guards
"""

from app.core.errors import AuthError, ForbiddenError
from app.core.logger import logger
from app.dependencies.pipeline import RequestContext
from app.models.user import Role
from app.schemas.auth import Credentials
from app.utils.validators import normalize_credential, validate_email, validate_password

BEARER_PREFIX = "Bearer "


def extract_bearer_token(header_value: str) -> str:
    """Token part of an Authorization header, or an empty string"""
    value = header_value or ""
    if value.startswith(BEARER_PREFIX):
        value = value[len(BEARER_PREFIX):]
    return value.strip()


async def authenticate(ctx: RequestContext) -> None:
    """
    Verify the bearer token and attach the decoded Identity to the context.

    Rejects with 401 when the header is missing, the token has expired or
    the token is invalid.
    """
    token = extract_bearer_token(ctx.header("Authorization"))
    if not token:
        logger.warning("Authentication required: No token provided", metadata={"event": "auth_missing_token"})
        raise AuthError("Access denied, No token provided", code="NO_TOKEN")

    try:
        ctx.identity = ctx.credential_service.verify_token(token)
    except AuthError as e:
        logger.warning(f"Authentication failed: {e.message}", metadata={"event": "auth_failed", "code": e.code})
        raise

    logger.debug("Authentication successful", user_id=ctx.identity.subject_id)


def authorize(role: Role):
    """Guard factory: the attached identity must hold exactly ``role``"""
    role = Role(role)

    async def guard(ctx: RequestContext) -> None:
        if ctx.identity is None or not ctx.identity.has_role(role):
            logger.warning(
                "Access denied: role mismatch",
                user_id=ctx.identity.subject_id if ctx.identity else None,
                metadata={"event": "authorization_failed", "required_role": role.value}
            )
            raise ForbiddenError("Forbidden. You do not have access.")

    guard.__name__ = f"authorize_{role.value}"
    return guard


async def validate_credentials(ctx: RequestContext) -> None:
    """Check email then password from the body and keep their trimmed form"""
    body = await ctx.payload()
    email, password = body.get("email"), body.get("password")

    error = validate_email(email) or validate_password(password)
    if error:
        raise error

    ctx.credentials = Credentials(
        email=normalize_credential(email),
        password=normalize_credential(password),
    )
