"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from home_bar.api.schemas import (
    InventoryItemCreate,
    InventoryItemUpdate,
    RecipeCreate,
    RecipeUpdate,
    RecommendationRequest,
)
from home_bar.api.serializers import (
    serialize_item,
    serialize_recipe,
    serialize_result,
)
from home_bar.app_logging import configure_logging
from home_bar.config import parse_cors_origins
from home_bar.containers import AppContainer
from home_bar.domain.errors import NotFoundError, ValidationError


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(
        getattr(logging, container.settings.log_level.upper(), logging.INFO)
    )
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Home Bar API")
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(NotFoundError)
    async def not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)}
        )

    @app.exception_handler(ValidationError)
    async def invalid(_request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)}
        )

    @app.exception_handler(Exception)
    async def unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error", extra={"path": request.url.path}, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/inventory")
    async def list_inventory(request: Request) -> dict[str, object]:
        """Return every inventory item."""
        state_container: AppContainer = request.app.state.container
        items = state_container.inventory_service.list_items()
        return {"items": [serialize_item(item) for item in items], "count": len(items)}

    @app.get("/inventory/expiring")
    async def list_expiring(request: Request, days: int = 7) -> dict[str, object]:
        """Return items expiring within the given number of days."""
        state_container: AppContainer = request.app.state.container
        items = state_container.inventory_service.list_expiring(days)
        return {
            "items": [serialize_item(item) for item in items],
            "count": len(items),
            "daysAhead": days,
        }

    @app.get("/inventory/{item_id}")
    async def get_inventory_item(item_id: str, request: Request) -> dict[str, object]:
        """Return one inventory item."""
        state_container: AppContainer = request.app.state.container
        return serialize_item(state_container.inventory_service.get_item(item_id))

    @app.post("/inventory", status_code=status.HTTP_201_CREATED)
    async def create_inventory_item(
        body: InventoryItemCreate, request: Request
    ) -> dict[str, object]:
        """Create an inventory item."""
        state_container: AppContainer = request.app.state.container
        item = state_container.inventory_service.create_item(body.model_dump())
        return serialize_item(item)

    @app.put("/inventory/{item_id}")
    async def update_inventory_item(
        item_id: str, body: InventoryItemUpdate, request: Request
    ) -> dict[str, object]:
        """Apply a partial update to an inventory item."""
        state_container: AppContainer = request.app.state.container
        item = state_container.inventory_service.update_item(item_id, body.changes())
        return serialize_item(item)

    @app.delete("/inventory/{item_id}")
    async def delete_inventory_item(item_id: str, request: Request) -> dict[str, str]:
        """Delete an inventory item."""
        state_container: AppContainer = request.app.state.container
        state_container.inventory_service.delete_item(item_id)
        return {"message": "Item deleted successfully", "itemId": item_id}

    @app.get("/recipes")
    async def list_recipes(request: Request) -> dict[str, object]:
        """Return every recipe."""
        state_container: AppContainer = request.app.state.container
        recipes = state_container.recipe_service.list_recipes()
        return {
            "recipes": [serialize_recipe(recipe) for recipe in recipes],
            "count": len(recipes),
        }

    @app.get("/recipes/{recipe_id}")
    async def get_recipe(recipe_id: str, request: Request) -> dict[str, object]:
        """Return one recipe."""
        state_container: AppContainer = request.app.state.container
        return serialize_recipe(state_container.recipe_service.get_recipe(recipe_id))

    @app.post("/recipes", status_code=status.HTTP_201_CREATED)
    async def create_recipe(body: RecipeCreate, request: Request) -> dict[str, object]:
        """Create a recipe."""
        state_container: AppContainer = request.app.state.container
        recipe = state_container.recipe_service.create_recipe(body.model_dump())
        return serialize_recipe(recipe)

    @app.put("/recipes/{recipe_id}")
    async def update_recipe(
        recipe_id: str, body: RecipeUpdate, request: Request
    ) -> dict[str, object]:
        """Apply a partial update to a recipe."""
        state_container: AppContainer = request.app.state.container
        recipe = state_container.recipe_service.update_recipe(recipe_id, body.changes())
        return serialize_recipe(recipe)

    @app.delete("/recipes/{recipe_id}")
    async def delete_recipe(recipe_id: str, request: Request) -> dict[str, str]:
        """Delete a recipe."""
        state_container: AppContainer = request.app.state.container
        state_container.recipe_service.delete_recipe(recipe_id)
        return {"message": "Recipe deleted successfully", "recipeId": recipe_id}

    @app.post("/recommendations", response_model=None)
    async def recommendations(
        body: RecommendationRequest, request: Request
    ) -> dict[str, object] | JSONResponse:
        """Recommend drinks for the selected moods."""
        if not body.moods:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={
                    "error": "Please provide at least one mood in the request body"
                },
            )
        state_container: AppContainer = request.app.state.container
        try:
            result = state_container.recommendation_service.get_recommendations(
                body.moods, show_all=body.show_all, limit=body.limit
            )
        except Exception:
            logger.exception(
                "Failed to get recommendations", extra={"moods": body.moods}
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Failed to get recommendations"},
            )
        return serialize_result(result)

    return app
