"""
Product guards: field validation, name uniqueness and existence checks
"""

from app.core.errors import ValidationError
from app.core.logger import logger
from app.dependencies.pipeline import RequestContext
from app.repositories.product import duplicate_name_error
from app.services.product import product_not_found
from app.utils.validators import coerce_number, validate_positive_number, validate_product_name

NUMERIC_FIELDS = ("price", "quantity")


async def _validate_fields(ctx: RequestContext, name_required: bool) -> None:
    body = await ctx.payload()
    fields = {}

    name = body.get("name")
    if name_required or name is not None:
        error = validate_product_name(name)
        if error:
            raise error
        fields["name"] = name

    for field_name in NUMERIC_FIELDS:
        raw = body.get(field_name)
        if raw is None:
            continue
        error = validate_positive_number(raw, field_name)
        if error:
            raise error
        fields[field_name] = coerce_number(raw)

    ctx.product_fields = fields


async def validate_new_product(ctx: RequestContext) -> None:
    """Create payload: name shape is mandatory, numeric fields when present"""
    await _validate_fields(ctx, name_required=True)


async def validate_product_changes(ctx: RequestContext) -> None:
    """Update payload: every field is optional but must be valid when present"""
    await _validate_fields(ctx, name_required=False)


async def require_unique_product_name(ctx: RequestContext) -> None:
    """Reject creation when a product with the submitted name exists (409)"""
    name = (await ctx.payload()).get("name")
    error = validate_product_name(name)
    if error:
        raise error

    if await ctx.products.exists(name):
        logger.warning(
            f"Product name already taken: {name}",
            metadata={"event": "product_conflict", "name": name}
        )
        raise duplicate_name_error(name)


async def require_existing_product(ctx: RequestContext) -> None:
    """Route parameter ``name`` must be non-blank and refer to a stored product"""
    name = ctx.path_params.get("name")
    if not name or not name.strip():
        raise ValidationError("Product name is required", code="PRODUCT_NAME_REQUIRED")

    if not await ctx.products.exists(name):
        logger.warning(
            f"Product not found: {name}",
            metadata={"event": "product_not_found", "name": name}
        )
        raise product_not_found()
