"""Services orchestrating build-plan resolution."""

from buildplan.services.plan_service import (
    BuildPlanService,
    PlanRequest,
    create_build_plan_service,
    write_selections,
)


__all__ = [
    "BuildPlanService",
    "PlanRequest",
    "create_build_plan_service",
    "write_selections",
]
