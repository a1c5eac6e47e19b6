# cli.py
import argparse
import logging
import sys
from typing import List, Optional

from pathtracer.camera.camera import Camera
from pathtracer.config import DEFAULT_SEED_SEQUENCE, DEFAULT_SEED_STATE, RenderSettings
from pathtracer.core.pcg import PCG32
from pathtracer.core.vector import Vector3
from pathtracer.errors import ConfigurationError
from pathtracer.output import check_output_path, write_image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES, get_scene

logger = logging.getLogger("pathtracer")

# Seed of the generator that picks BVH split axes.
BVH_SEED = (42, 54)


def _vector(text: str) -> Vector3:
    try:
        x, y, z = (float(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y,z but got {text!r}") from None
    return Vector3(x, y, z)


def _aspect(text: str) -> float:
    try:
        if ":" in text:
            w, h = text.split(":")
            return float(w) / float(h)
        return float(text)
    except (ValueError, ZeroDivisionError):
        raise argparse.ArgumentTypeError(f"invalid aspect ratio {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pathtracer", description="Monte Carlo path tracer")
    parser.add_argument("output", help="output image path; format follows the extension")
    parser.add_argument("--scene", default="showcase", choices=sorted(SCENES),
                        help="scene to render (default: showcase)")
    parser.add_argument("--width", type=int, default=400, help="image width in pixels")
    parser.add_argument("--aspect", type=_aspect, default=16.0 / 9.0,
                        help="aspect ratio, e.g. 1.5 or 16:9")
    parser.add_argument("--samples", type=int, default=100, help="samples per pixel")
    parser.add_argument("--depth", type=int, default=50, help="maximum bounces per path")
    parser.add_argument("--seed-state", type=int, default=DEFAULT_SEED_STATE)
    parser.add_argument("--seed-sequence", type=int, default=DEFAULT_SEED_SEQUENCE)
    parser.add_argument("--workers", type=int, default=1, help="render processes")
    parser.add_argument("--bvh", dest="use_bvh", action="store_true", default=True,
                        help="accelerate intersection with a BVH (default)")
    parser.add_argument("--no-bvh", dest="use_bvh", action="store_false",
                        help="intersect by scanning the object list")

    camera = parser.add_argument_group("camera", "override the scene's camera pose")
    camera.add_argument("--look-from", type=_vector, metavar="X,Y,Z")
    camera.add_argument("--look-at", type=_vector, metavar="X,Y,Z")
    camera.add_argument("--vup", type=_vector, metavar="X,Y,Z")
    camera.add_argument("--vfov", type=float, help="vertical field of view in degrees")
    camera.add_argument("--aperture", type=float)
    camera.add_argument("--focus-distance", type=float)

    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v for progress, -vv for per-scanline output")
    return parser


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    settings = RenderSettings(
        image_width=args.width,
        aspect_ratio=args.aspect,
        samples_per_pixel=args.samples,
        max_depth=args.depth,
        seed_state=args.seed_state,
        seed_sequence=args.seed_sequence,
        workers=args.workers,
        use_bvh=args.use_bvh,
    )
    settings = settings.with_camera(get_scene(args.scene).camera)
    overrides = {name: getattr(args, name)
                 for name in ("look_from", "look_at", "vup", "vfov", "aperture", "focus_distance")
                 if getattr(args, name) is not None}
    return settings.with_camera(overrides).validate()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        output = check_output_path(args.output)
        settings = settings_from_args(args)
        world = get_scene(args.scene).build(PCG32(settings.seed_state, settings.seed_sequence))
        logger.info("Scene %r: %d objects", args.scene, len(world))
        if settings.use_bvh and len(world) > 0:
            world = world.build_bvh(PCG32(*BVH_SEED))
            logger.info("BVH built, depth %d", world.depth())
        camera = Camera.from_settings(settings)
        buffer = Renderer(settings).render(world, camera)
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    write_image(output, buffer, settings.image_width, settings.image_height)
    return 0


if __name__ == "__main__":
    sys.exit(main())
