"""Dependency container wiring for the application."""

from dataclasses import dataclass

from spoilage_guard.app_logging import configure_logging
from spoilage_guard.config import Settings
from spoilage_guard.services.dataset import DATASET
from spoilage_guard.services.model import SpoilageModel
from spoilage_guard.services.spoilage import SpoilageService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    model: SpoilageModel
    spoilage_service: SpoilageService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container and train the model once."""
    resolved_settings = settings or Settings()
    configure_logging(debug=resolved_settings.debug)
    model = SpoilageModel.train(
        DATASET,
        max_depth=resolved_settings.tree_max_depth,
        min_samples_split=resolved_settings.tree_min_samples_split,
    )
    spoilage_service = SpoilageService(
        model=model,
        analysis_delay_seconds=resolved_settings.analysis_delay_seconds,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        model=model,
        spoilage_service=spoilage_service,
    )
