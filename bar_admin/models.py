from bar_admin.domain.bar.models import Activity, Bar, Serving

OPTION_MODELS = {
    "activities": Activity,
    "servings": Serving,
}

__all__ = [
    "Activity",
    "Bar",
    "Serving",
    "OPTION_MODELS",
]
