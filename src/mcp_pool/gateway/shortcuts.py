"""Provider-specific shortcut routes.

These predate the generic REST routes and are kept for existing clients.
Each one is a single dispatcher call, like every other route.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response

from mcp_pool.gateway.rest import json_body, render_rest
from mcp_pool.protocols.errors import InvalidParamsError
from mcp_pool.protocols.models import Outcome

if TYPE_CHECKING:
    from mcp_pool.protocols.dispatcher import MethodDispatcher

MATERIAL_UI = "material-ui"


def build_material_ui_router(dispatcher: MethodDispatcher) -> APIRouter:
    router = APIRouter(prefix=f"/{MATERIAL_UI}", tags=[MATERIAL_UI])

    @router.get("/components")
    async def components() -> Response:
        outcome = await dispatcher.dispatch(
            MATERIAL_UI, "resources/read", {"uri": f"{MATERIAL_UI}://components"}
        )
        catalog: Any = {}
        if outcome.ok:
            contents = (outcome.value or {}).get("contents", [])
            if contents:
                catalog = json.loads(contents[0]["text"])
        return render_rest(outcome, {"components": catalog})

    @router.post("/generate")
    async def generate(request: Request) -> Response:
        try:
            arguments = await json_body(request)
        except InvalidParamsError as exc:
            return render_rest(Outcome.from_error(exc), {})
        outcome = await dispatcher.dispatch(
            MATERIAL_UI,
            "tools/call",
            {"name": "generate_component", "arguments": arguments},
        )
        return render_rest(outcome, {"generated": outcome.value})

    return router


def build_shortcut_routers(dispatcher: MethodDispatcher) -> list[APIRouter]:
    """Shortcut routers for the registered providers that have any."""
    routers: list[APIRouter] = []
    if MATERIAL_UI in dispatcher.registry:
        routers.append(build_material_ui_router(dispatcher))
    return routers
