"""
Batch commands that add a bounding collider to each selected object.

Each object is measured in its own local frame (including its children),
fitted against its lossy scale and gets the collider attached, replacing
any collider it already had. Objects without geometry are skipped.
"""

import logging
from dataclasses import dataclass, field

from engine.fitting import (
    NoGeometryFound,
    coerce_fit_mode,
    fit_box,
    fit_capsule,
    fit_sphere,
    require_local_bounds,
)
from engine.gameobjects.collider import BoxCollider, CapsuleCollider, SphereCollider

log = logging.getLogger(__name__)


@dataclass
class FitReport:
    fitted: list = field(default_factory=list)
    skipped: list = field(default_factory=list)


class ColliderTool:
    def __init__(self, height_fit_mode=None, radius_fit_mode=None, settings=None):
        """
        Docstring für __init__

        :param self: The object itself
        :param height_fit_mode: Capsule height fit mode, defaults to settings
        :param radius_fit_mode: Capsule & sphere radius fit mode, defaults to settings
        :param settings: Settings instance, defaults to engine.config.settings
        """
        if settings is None:
            from engine.config import settings

        self.height_fit_mode = height_fit_mode if height_fit_mode is not None else settings.height_fit_mode
        self.radius_fit_mode = radius_fit_mode if radius_fit_mode is not None else settings.radius_fit_mode

    # -------------------------------------------------
    # Fit modes (last selected value sticks)
    # -------------------------------------------------
    @property
    def height_fit_mode(self):
        return self._height_fit_mode

    @height_fit_mode.setter
    def height_fit_mode(self, value):
        self._height_fit_mode = coerce_fit_mode(value)

    @property
    def radius_fit_mode(self):
        return self._radius_fit_mode

    @radius_fit_mode.setter
    def radius_fit_mode(self, value):
        self._radius_fit_mode = coerce_fit_mode(value)

    # -------------------------------------------------
    # Commands
    # -------------------------------------------------
    def add_bounding_box_collider(self, objects) -> FitReport:
        def fit(obj, bounds):
            return BoxCollider.from_params(fit_box(bounds))

        return self._fit_each(objects, fit)

    def add_bounding_sphere_collider(self, objects) -> FitReport:
        def fit(obj, bounds):
            params = fit_sphere(bounds, obj.transform.lossy_scale, self.radius_fit_mode)
            return SphereCollider.from_params(params)

        return self._fit_each(objects, fit)

    def add_bounding_capsule_collider(self, objects) -> FitReport:
        def fit(obj, bounds):
            params = fit_capsule(
                bounds,
                obj.transform.lossy_scale,
                self.radius_fit_mode,
                self.height_fit_mode,
            )
            return CapsuleCollider.from_params(params)

        return self._fit_each(objects, fit)

    def _fit_each(self, objects, fit) -> FitReport:
        report = FitReport()
        for obj in objects:
            try:
                bounds = require_local_bounds(obj)
            except NoGeometryFound as exc:
                log.warning("Skipping %s: %s", obj.name, exc)
                report.skipped.append(obj)
                continue

            obj.collider = fit(obj, bounds)
            log.info("Added %r to %s", obj.collider, obj.name)
            report.fitted.append(obj)
        return report
