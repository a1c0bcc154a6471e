import argparse
import logging
import random
import sys
from pathlib import Path

# Ensure local repo packages are used even if older copies are installed.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tagcloud import Point, Size, create_layouter
from tagcloud_render import RenderConfig, load_render_config, render_to_file


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Lay out random tag boxes as a circular cloud and save a PNG."
    )
    parser.add_argument("--count", type=int, default=100, help="Number of tags")
    parser.add_argument("--min-size", type=int, default=10, help="Smallest tag side")
    parser.add_argument("--max-size", type=int, default=60, help="Largest tag side")
    parser.add_argument("--seed", type=int, default=0, help="Random seed for tag sizes")
    parser.add_argument(
        "--center",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Cloud center (defaults to the layout config's center)",
    )
    parser.add_argument("--config", default=None, help="Layout YAML config")
    parser.add_argument("--render-config", default=None, help="Render YAML config")
    parser.add_argument("--output", default="cloud.png", help="Output image path")
    parser.add_argument("--verbose", action="store_true", help="Log every placement")
    return parser.parse_args()


def random_sizes(count: int, min_size: int, max_size: int, seed: int) -> list[Size]:
    rng = random.Random(seed)
    sizes = []
    for _ in range(count):
        height = rng.randint(min_size, max_size)
        # Tags are wider than tall, like words set in a single line.
        width = rng.randint(height, height * 4)
        sizes.append(Size(width, height))
    # Largest tags first gives the densest core.
    sizes.sort(key=lambda s: s.width * s.height, reverse=True)
    return sizes


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    center = Point(*args.center) if args.center else None
    layouter = create_layouter(center=center, config_path=args.config)
    layouter.put_rectangles(
        random_sizes(args.count, args.min_size, args.max_size, args.seed)
    )
    logging.info("Placed %d rectangles around %s", len(layouter), layouter.center)

    render_cfg = (
        load_render_config(args.render_config) if args.render_config else RenderConfig()
    )
    render_to_file(layouter.rectangles, args.output, render_cfg)


if __name__ == "__main__":
    main()
