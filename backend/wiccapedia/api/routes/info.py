"""API Information — root document describing the available endpoints."""

from fastapi import APIRouter

from wiccapedia.api.routes.health import SERVICE_NAME, SERVICE_VERSION

router = APIRouter(tags=["info"])

_RESOURCES = ("users", "notebooks", "covers", "decorations")


@router.get("/")
async def api_info():
    endpoints = {
        resource: {
            f"POST /api/{resource}": f"Create a {resource[:-1]}",
            f"GET /api/{resource}/{{id}}": f"Get a {resource[:-1]} by ID",
        }
        for resource in _RESOURCES
    }
    endpoints["covers"]["GET /api/covers/default"] = (
        "Get the default cover and its animation document"
    )
    endpoints["gems"] = {
        "GET /api/gems": (
            "List gems ($search, $filter, $orderby, name, color, category, "
            "chemical_formula, limit, cursor)"
        ),
        "POST /api/gems": "Add a gem",
        "GET /api/gems/{id}": "Get a gem by ID",
        "GET /api/gems/search?q=": "Search gems by name, description, category or color",
        "GET /api/gems/metadata/colors": "Distinct gem colors",
        "GET /api/gems/metadata/categories": "Distinct gem categories",
        "GET /api/gems/metadata/formulas": "Distinct chemical formulas",
    }
    endpoints["health"] = {
        "GET /api/health/": "Liveness probe",
        "GET /api/health/ready": "Readiness probe",
    }
    return {
        "name": "Wiccapedia API",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "endpoints": endpoints,
    }
