import argparse
import random
import traceback

from rome_tour.clients.tourist import Tourist
from rome_tour.collection.rome import Rome
from rome_tour.config import load_settings
from rome_tour.controllers.interactive_demo import InteractiveDemo
from rome_tour.utils.logger import write_log

STRATEGIES = {
    "random": "random_walk",
    "phone": "phone_app",
    "guide": "local_guide",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Explore Rome with different guides")
    parser.add_argument("--strategy", choices=sorted(STRATEGIES), help="Run a single tour with this guide and exit")
    parser.add_argument("--places", type=int, default=3, help="Number of places for --strategy (default: 3)")
    parser.add_argument("--compare", action="store_true", help="Compare all three guides and exit")
    parser.add_argument("--seed", type=int, help="Seed for the random walk")
    parser.add_argument("--name", help="Tourist name")
    return parser


def run(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.places < 1:
        parser.error("--places must be at least 1")
    settings = load_settings()

    # CLI flags win over the environment
    seed = args.seed if args.seed is not None else settings.seed
    rome = Rome(rng=random.Random(seed) if seed is not None else None)

    if args.strategy:
        tourist = Tourist(args.name or settings.tourist_name)
        guide = getattr(rome, STRATEGIES[args.strategy])()
        tourist.visit(guide, args.places)
        return 0

    demo = InteractiveDemo(rome, settings)
    if args.compare:
        demo.compare_all_methods(pause=False)
        return 0

    demo.start()
    return 0


def main(argv=None):
    try:
        code = run(argv)
    except KeyboardInterrupt:
        print("\n👋 Arrivederci!")
        code = 130
    except Exception as e:
        write_log("app_errors", f"Application error: {traceback.format_exc()}")
        print(f"Application error: {e}")
        code = 1
    raise SystemExit(code)


if __name__ == "__main__":
    main()
