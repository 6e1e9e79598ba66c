from fastapi import APIRouter, FastAPI, Request

from videoforge.services.state import recent_generations

router = APIRouter()


def route_table(app: FastAPI):
    """Path and methods of every API operation, taken from the OpenAPI schema.

    ``app.router.routes`` nests included routers on newer FastAPI releases, the
    schema stays flat.
    """
    items = []
    for path, operations in app.openapi().get("paths", {}).items():
        methods = sorted(m.upper() for m in operations)
        items.append({"path": path, "methods": methods})
    return items


@router.get("/debug/routes", tags=["debug"])
def debug_routes(request: Request):
    items = route_table(request.app)
    return {"count": len(items), "routes": items}


@router.get("/debug/state", tags=["debug"])
def debug_state(request: Request):
    provider = request.app.state.provider
    return {
        "provider": provider.name,
        "front_dir": str(request.app.state.front_dir),
        "recent_generations": recent_generations(),
    }
