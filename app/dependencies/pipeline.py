"""
Guard pipeline for request handling.

A guard is an async callable taking the RequestContext. It returns to let
the request continue or raises an ErrorResponse, which ends the request
with that error. ``guarded`` turns an ordered list of guards into a single
FastAPI dependency that runs them in sequence and hands the context to the
route handler.

Usage:
    @router.put("/{name}")
    async def update_product(
        ctx: RequestContext = Depends(guarded(authenticate, authorize(Role.ADMIN), ...)),
    ):
        ...
"""

import json
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import Depends, Request

from app.core.errors import ValidationError
from app.dependencies.services import get_credential_service, get_product_repository
from app.models.user import Identity
from app.repositories.product import ProductRepository
from app.schemas.auth import Credentials
from app.services.credentials import CredentialService

_UNSET = object()
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass
class RequestContext:
    """Per-request state threaded through the guards and into the handler"""

    request: Request
    credential_service: CredentialService
    products: ProductRepository
    identity: Optional[Identity] = None
    credentials: Optional[Credentials] = None
    product_fields: Dict[str, Any] = field(default_factory=dict)
    _body: Any = field(default=_UNSET, repr=False)

    @property
    def path_params(self) -> Dict[str, Any]:
        return self.request.path_params

    def header(self, name: str) -> Optional[str]:
        return self.request.headers.get(name)

    async def payload(self) -> Dict[str, Any]:
        """
        Request body as a dict.

        Form-encoded bodies are read as form fields, anything else as a JSON
        object. An empty body is an empty object.
        """
        if self._body is _UNSET:
            content_type = self.header("content-type") or ""
            if content_type.startswith(FORM_CONTENT_TYPE):
                self._body = dict(await self.request.form())
                return self._body

            raw = await self.request.body()
            if not raw.strip():
                self._body = {}
            else:
                try:
                    self._body = json.loads(raw)
                except (ValueError, UnicodeDecodeError):
                    raise ValidationError("Invalid request body", code="INVALID_BODY")
        if not isinstance(self._body, dict):
            raise ValidationError("Invalid request body", code="INVALID_BODY")
        return self._body


Guard = Callable[[RequestContext], Awaitable[None]]


async def run_guards(ctx: RequestContext, guards) -> RequestContext:
    """Run guards in order; the first one that raises ends the chain"""
    for guard in guards:
        await guard(ctx)
    return ctx


def guarded(*guards: Guard):
    """Build a FastAPI dependency running ``guards`` in the given order"""

    async def dependency(
        request: Request,
        credential_service: CredentialService = Depends(get_credential_service),
        products: ProductRepository = Depends(get_product_repository),
    ) -> RequestContext:
        ctx = RequestContext(request=request, credential_service=credential_service, products=products)
        return await run_guards(ctx, guards)

    dependency.__name__ = "guarded_" + "_".join(getattr(g, "__name__", "guard") for g in guards)
    return dependency
