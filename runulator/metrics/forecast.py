from collections.abc import Iterable
import logging

from runulator.errors import InvalidArgumentError
from runulator.models import DEFAULT_FATIGUE_COEFFICIENT, HALF_MARATHON, MARATHON, Run

logger = logging.getLogger(__name__)

# Race distances (km) that are always forecast.
STANDARD_DISTANCES = (5.0, 10.0, HALF_MARATHON, MARATHON)


def forecast_distances(
    run: Run, favorites: Iterable[Run] = (), extra: Iterable[float] = ()
) -> list[float]:
    """
    Collect the distances to forecast, sorted and without duplicates.

    Args:
        run: The run to forecast from; its own distance is included.
        favorites: Favorite runs whose distances are included.
        extra: Further distances in km.
    """
    distances = set(STANDARD_DISTANCES)
    distances.add(run.distance)
    distances.update(favorite.distance for favorite in favorites)
    distances.update(extra)
    return sorted(distances)


def forecast_table(
    run: Run,
    favorites: Iterable[Run] = (),
    fatigue_coefficient: float = DEFAULT_FATIGUE_COEFFICIENT,
    extra: Iterable[float] = (),
) -> list[Run]:
    """
    Forecast `run` over the standard race distances, its own and the favorites'.

    Distances that can't be forecast (e.g. so short the predicted duration rounds
    to 0 seconds) are logged and left out.

    Args:
        run: The run to forecast from.
        favorites: Favorite runs whose distances are forecast too.
        fatigue_coefficient: Exponent of Riegel's formula.
        extra: Further distances in km.
    """
    table = []
    for distance in forecast_distances(run, favorites, extra):
        try:
            table.append(run.get_forecast_run(distance, fatigue_coefficient))
        except InvalidArgumentError as e:
            logger.warning(f"Skipping forecast for {distance} km: {e.message}")
    return table
