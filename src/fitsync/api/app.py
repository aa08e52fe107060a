"""FastAPI application factory."""

import logging
from collections.abc import Callable
from dataclasses import asdict
from uuid import UUID

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from fitsync.api.models import (
    FoodLog,
    GoalUpdate,
    ProfilePayload,
    TimezoneUpdate,
    WeightUpdate,
    WorkoutEstimateRequest,
    WorkoutLog,
)
from fitsync.app_logging import configure_logging
from fitsync.containers import AppContainer
from fitsync.domain.diary import FoodEntry, WorkoutEntry
from fitsync.domain.errors import IncompleteProfileError, InvalidAmountError
from fitsync.domain.profile import EnergyResult
from fitsync.services.workouts import estimate_by_distance, estimate_by_duration

INCOMPLETE_PROFILE_MESSAGE = "Enter your info to see your plan."


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(InvalidAmountError)
    async def invalid_amount_handler(
        request: Request, exc: InvalidAmountError
    ) -> JSONResponse:
        logger.warning(
            "Rejected amount on %s %s: %s", request.method, request.url.path, exc
        )
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/energy/plan")
    async def preview_plan(payload: ProfilePayload, request: Request) -> dict:
        """Compute a plan from posted profile values."""
        state_container: AppContainer = request.app.state.container
        snapshot = payload.to_snapshot()
        return _plan_response(lambda: state_container.energy_service.preview(snapshot))

    @app.post("/workouts/estimate")
    async def estimate_workout(payload: WorkoutEstimateRequest) -> dict[str, int]:
        """Estimate calories burned from duration or distance."""
        if payload.distance is not None:
            estimate = estimate_by_distance(
                payload.exercise_type,
                payload.distance,
                payload.distance_unit,
                payload.intensity,
            )
        elif payload.duration_minutes is not None:
            estimate = estimate_by_duration(payload.duration_minutes, payload.intensity)
        else:
            raise HTTPException(
                status_code=422,
                detail="Provide duration_minutes or distance.",
            )
        return asdict(estimate)

    @app.get("/users/{user_id}/plan")
    async def get_plan(user_id: UUID, request: Request) -> dict:
        """Compute the plan for the stored profile."""
        state_container: AppContainer = request.app.state.container
        return _plan_response(lambda: state_container.energy_service.get_plan(user_id))

    @app.post("/users/{user_id}/plan/apply")
    async def apply_plan(user_id: UUID, request: Request) -> dict:
        """Compute the plan and save its calorie goal."""
        state_container: AppContainer = request.app.state.container
        return _plan_response(
            lambda: state_container.energy_service.apply_plan(user_id)
        )

    @app.put("/users/{user_id}/goal")
    async def set_goal(user_id: UUID, payload: GoalUpdate, request: Request) -> dict:
        """Store a manually entered calorie goal."""
        state_container: AppContainer = request.app.state.container
        balance = state_container.balance_service.set_goal(
            user_id, payload.goal_calories
        )
        return asdict(balance)

    @app.get("/users/{user_id}/balance")
    async def get_balance(user_id: UUID, request: Request) -> dict:
        """Return today's food, exercise and remaining calories."""
        state_container: AppContainer = request.app.state.container
        return asdict(state_container.balance_service.get_today(user_id))

    @app.put("/users/{user_id}/timezone")
    async def set_timezone(
        user_id: UUID, payload: TimezoneUpdate, request: Request
    ) -> dict[str, str]:
        """Store the timezone used for the user's day boundaries."""
        state_container: AppContainer = request.app.state.container
        try:
            state_container.user_settings_service.set_timezone(
                user_id, payload.timezone
            )
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return {"timezone": payload.timezone}

    @app.get("/users/{user_id}/macros")
    async def get_macros(user_id: UUID, request: Request) -> dict:
        """Return today's rounded protein, carbs and fat totals."""
        state_container: AppContainer = request.app.state.container
        return asdict(state_container.diary_service.get_macros(user_id))

    @app.post("/users/{user_id}/foods", status_code=status.HTTP_201_CREATED)
    async def log_food(user_id: UUID, payload: FoodLog, request: Request) -> dict:
        """Log a food entry for today."""
        state_container: AppContainer = request.app.state.container
        entry, balance = state_container.diary_service.log_food(
            user_id,
            name=payload.name,
            calories=payload.calories,
            quantity=payload.quantity,
            meal_type=payload.meal_type,
            protein=payload.protein,
            carbs=payload.carbs,
            fat=payload.fat,
        )
        return {"entry": _food_payload(entry), "balance": asdict(balance)}

    @app.delete("/users/{user_id}/foods/{entry_id}")
    async def delete_food(user_id: UUID, entry_id: UUID, request: Request) -> dict:
        """Delete a food entry."""
        state_container: AppContainer = request.app.state.container
        balance = state_container.diary_service.delete_food(user_id, entry_id)
        if balance is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return asdict(balance)

    @app.post("/users/{user_id}/workouts", status_code=status.HTTP_201_CREATED)
    async def log_workout(user_id: UUID, payload: WorkoutLog, request: Request) -> dict:
        """Log a workout for today."""
        state_container: AppContainer = request.app.state.container
        calories_burned = payload.calories_burned
        if calories_burned is None:
            calories_burned = estimate_by_duration(
                payload.duration_minutes, payload.intensity
            ).calories_burned
        entry, balance = state_container.diary_service.log_workout(
            user_id,
            exercise_type=payload.exercise_type,
            duration_minutes=payload.duration_minutes,
            intensity=payload.intensity,
            calories_burned=calories_burned,
        )
        return {
            "entry": _workout_payload(entry),
            "balance": asdict(balance),
        }

    @app.delete("/users/{user_id}/workouts/{entry_id}")
    async def delete_workout(user_id: UUID, entry_id: UUID, request: Request) -> dict:
        """Delete a workout entry."""
        state_container: AppContainer = request.app.state.container
        balance = state_container.diary_service.delete_workout(user_id, entry_id)
        if balance is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return asdict(balance)

    @app.get("/users/{user_id}/weight")
    async def get_weight(user_id: UUID, request: Request) -> dict:
        """Return weight progress, or null until both weights are known."""
        state_container: AppContainer = request.app.state.container
        progress = state_container.weight_service.get_progress(user_id)
        return {"progress": asdict(progress) if progress else None}

    @app.put("/users/{user_id}/weight")
    async def update_weight(
        user_id: UUID, payload: WeightUpdate, request: Request
    ) -> dict:
        """Store current and target weight."""
        state_container: AppContainer = request.app.state.container
        progress = state_container.weight_service.update(
            user_id, payload.current_weight, payload.target_weight
        )
        return {"progress": asdict(progress)}

    @app.get("/users/{user_id}/weight/history")
    async def weight_history(
        user_id: UUID, request: Request, limit: int = Query(10, ge=1, le=100)
    ) -> dict:
        """Return recent weigh-ins."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.weight_service.get_history(user_id, limit)
        return {
            "entries": [
                {"date": entry.day.isoformat(), "weight": entry.weight}
                for entry in entries
            ]
        }

    return app


def _plan_response(compute: Callable[[], EnergyResult]) -> dict[str, object]:
    """Run a plan computation, mapping an incomplete profile to a placeholder."""
    try:
        result = compute()
    except IncompleteProfileError as exc:
        return {
            "status": "incomplete",
            "plan": None,
            "missing_fields": list(exc.missing_fields),
            "message": INCOMPLETE_PROFILE_MESSAGE,
        }
    return {
        "status": "ready",
        "plan": asdict(result),
        "missing_fields": [],
        "message": None,
    }


def _food_payload(entry: FoodEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "date": entry.day.isoformat(),
        "name": entry.name,
        "calories": entry.calories,
        "quantity": entry.quantity,
        "meal_type": entry.meal_type,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "total_calories": entry.total_calories,
    }


def _workout_payload(entry: WorkoutEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "date": entry.day.isoformat(),
        "exercise_type": entry.exercise_type,
        "duration_minutes": entry.duration_minutes,
        "intensity": entry.intensity.value,
        "calories_burned": entry.calories_burned,
    }
