"""Main entry point for geonoise."""

import argparse
import logging
from pathlib import Path
from typing import Iterator

from .config import PROJECTIONS, GRADIENTS, RenderSettings, load_render_settings
from .core.module import Evaluable, Module
from .presets import PRESETS


def iter_tree(module: Evaluable, depth: int = 0) -> Iterator[tuple[int, Evaluable]]:
    """Iterate over a module tree depth-first, yielding (depth, module)."""
    yield depth, module
    if isinstance(module, Module):
        for source in module.sources():
            yield from iter_tree(source, depth + 1)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Geonoise - Coherent Noise Module Renderer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Image file to write (default: <preset>.png)",
    )
    parser.add_argument(
        "-c", "--config",
        metavar="PATH",
        help="YAML render settings file",
    )
    parser.add_argument(
        "-p", "--preset",
        choices=list(PRESETS.keys()),
        help="Preset to render (default: terrain)",
    )
    parser.add_argument(
        "--resolution",
        metavar="WxH",
        help="Render resolution (default: 256x256)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Base seed of the preset (default: 0)",
    )
    parser.add_argument(
        "--projection",
        choices=PROJECTIONS,
        help="Surface the module is sampled on (default: plane)",
    )
    parser.add_argument(
        "--gradient",
        choices=list(GRADIENTS.keys()),
        help="Color gradient (default: grayscale)",
    )
    parser.add_argument(
        "--light",
        action="store_true",
        help="Enable hill shading",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> RenderSettings:
    """Combine the settings file (if any) with command line overrides."""
    settings = load_render_settings(args.config) if args.config else RenderSettings()

    if args.preset is not None:
        settings.preset = args.preset
    if args.seed is not None:
        settings.seed = args.seed
    if args.resolution is not None:
        try:
            width, height = map(int, args.resolution.lower().split("x"))
        except ValueError:
            raise ValueError(f"Resolution must look like WxH, got {args.resolution!r}") from None
        settings.size = (width, height)
    if args.projection is not None:
        settings.projection = args.projection
        settings.bounds = None
    if args.gradient is not None:
        settings.gradient = args.gradient
    if args.light:
        settings.light_enabled = True

    if settings.preset not in PRESETS:
        raise ValueError(f"Unknown preset: {settings.preset}")
    return settings


def main(argv: list[str] | None = None) -> None:
    """Render a preset to an image file."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    settings = resolve_settings(args)
    root = PRESETS[settings.preset](settings.seed)

    # Display module tree
    print("Geonoise - Coherent Noise Module Renderer")
    print("=" * 40)
    modules = list(iter_tree(root))
    print(f"Preset '{settings.preset}' contains {len(modules)} modules:")
    for depth, module in modules:
        indent = "  " * depth
        print(f"{indent}- {type(module).__name__}")

    output_path = Path(args.render or f"{settings.preset}.png")
    width, height = settings.size
    print(f"\nRendering to {output_path} ({width}x{height}, {settings.projection})...")

    noise_map = settings.make_builder(root).build()
    settings.make_renderer().save(noise_map, output_path)

    print(f"Value range: [{noise_map.min:.4f}, {noise_map.max:.4f}]")
    print(f"Saved render to {output_path}")


if __name__ == "__main__":
    main()
