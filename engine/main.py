"""
Fit bounding colliders to the objects of a level file.

Usage:
    python -m engine.main level.json --shape capsule
    python -m engine.main level.json --shape sphere --radius-fit outside --object crate
"""

import argparse
import json
import logging
import sys

from engine.config import settings
from engine.fitting import FitMode
from engine.tools.collider_tool import ColliderTool
from engine.world import World

log = logging.getLogger("engine.main")

FIT_MODES = [mode.value for mode in FitMode]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fit bounding colliders to level objects.")
    parser.add_argument("level", help="Path to the level JSON file")
    parser.add_argument("--shape", choices=["box", "sphere", "capsule"], default="box")
    parser.add_argument("--height-fit", type=str.lower, choices=FIT_MODES, default=None,
                        help="Capsule height fit mode")
    parser.add_argument("--radius-fit", type=str.lower, choices=FIT_MODES, default=None,
                        help="Capsule & sphere radius fit mode")
    parser.add_argument("--object", action="append", dest="objects", default=None,
                        help="Name of an object to fit (repeatable, default: all top-level objects)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        world = World(args.level)
    except FileNotFoundError as exc:
        log.error("%s", exc)
        return 1

    if args.objects:
        targets = []
        for name in args.objects:
            obj = world.find(name)
            if obj is None:
                log.warning("No object named %r in %s", name, args.level)
                continue
            targets.append(obj)
    else:
        targets = world.objects

    tool = ColliderTool(height_fit_mode=args.height_fit, radius_fit_mode=args.radius_fit)
    command = {
        "box": tool.add_bounding_box_collider,
        "sphere": tool.add_bounding_sphere_collider,
        "capsule": tool.add_bounding_capsule_collider,
    }[args.shape]

    report = command(targets)
    for obj in report.fitted:
        print(json.dumps({"name": obj.name, "collider": obj.collider.to_dict()}))

    log.info("Fitted %d object(s), skipped %d", len(report.fitted), len(report.skipped))
    return 0


if __name__ == "__main__":
    sys.exit(main())
