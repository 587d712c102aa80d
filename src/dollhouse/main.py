"""
Dollhouse — Entry Point

Builds the household, then either opens the pygame window or, with
--headless, runs the timers for a fixed stretch of real time and prints a
diagnostic report.
"""

import argparse

from dollhouse.agent.personality import (
    PERSONALITY_TEMPLATES, DEFAULT_PERSONALITY, assign_personality,
)
from dollhouse.config import RANDOM_SEED, DEFAULT_SPEED_MULTIPLIER
from dollhouse.core.logger import SimLogger
from dollhouse.engine.context import create_context
from dollhouse.engine.loop import SimulationEngine
from dollhouse.tools.diagnostics import HouseholdDiagnostics


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="A little person living in a three-storey house, with a dog.")
    parser.add_argument("--seed", type=int, default=RANDOM_SEED,
                        help="Random seed for decisions and the dog (default: %(default)s)")
    parser.add_argument("--speed", type=float, default=DEFAULT_SPEED_MULTIPLIER,
                        help="Simulated seconds per needs tick (default: %(default)s)")
    parser.add_argument("--headless", type=float, metavar="SECONDS", default=None,
                        help="Run without a window for this many real seconds")
    parser.add_argument("--log-dir", default="logs",
                        help="Directory for the dated simulation log (default: %(default)s)")
    parser.add_argument("--personality", choices=sorted(PERSONALITY_TEMPLATES),
                        default=DEFAULT_PERSONALITY,
                        help="Personality archetype (default: %(default)s)")
    parser.add_argument("--echo", action="store_true",
                        help="Also print log lines to the terminal")
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)

    logger = SimLogger()
    logger.echo = args.echo
    log_path = logger.attach_file(args.log_dir)

    print("=" * 50)
    print("  DOLLHOUSE — Little Computer Person")
    print("=" * 50)
    print(f"  Seed: {args.seed}  |  Speed: {args.speed:g}x  |  Personality: {args.personality}")
    print(f"  Log: {log_path}")
    print()

    ctx = create_context(
        seed=args.seed,
        personality=assign_personality(args.personality),
        speed_multiplier=args.speed,
    )
    engine = SimulationEngine(ctx)
    diag = HouseholdDiagnostics(engine)

    if args.headless is not None:
        logger.log_event("SYSTEM", f"Headless run for {args.headless:g}s")
        try:
            engine.run_for(args.headless)
        except KeyboardInterrupt:
            print("\n[MAIN] Interrupted.")
        finally:
            engine.shutdown()
            print(diag.dump_all())
            logger.close()
        return

    from dollhouse.gui.renderer import Renderer

    print("Controls: F=Feed, L=Letter, M=Music, G=Greet, ESC=Quit")
    print()
    renderer = Renderer(engine)
    try:
        renderer.run()
    except KeyboardInterrupt:
        print("\n[MAIN] Interrupted.")
        engine.shutdown()
    finally:
        print(diag.dump_all())
        logger.close()


if __name__ == "__main__":
    main()
