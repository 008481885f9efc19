from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from strawberry.fastapi import BaseContext, GraphQLRouter

from gateway.config import Settings
from gateway.rest_client import RestClient
from gateway.schema import schema

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


class GatewayContext(BaseContext):
    def __init__(self, rest: RestClient):
        super().__init__()
        self.rest = rest


async def get_context(request: Request) -> GatewayContext:
    # One shared AsyncClient per app, opened in the lifespan
    return GatewayContext(rest=RestClient(request.app.state.http))


def create_graphql_router(settings: Settings) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql else None,
    )


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}


# React client bootstrap
@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    settings: Settings = request.app.state.settings
    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": "Users", "graphql_path": settings.graphql_path},
    )
