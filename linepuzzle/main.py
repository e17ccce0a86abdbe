import argparse
import random

from linepuzzle.config import (
    DEBUG_DRAW,
    OUTPUT_FOLDER,
    PUZZLE_PATTERN,
    get_active_params,
)
from linepuzzle.engine.puzzle_engine import PuzzleEngine
from linepuzzle.errors import PuzzleFormatError
from linepuzzle.utils.logger_config import configure_logging
from linepuzzle.utils.puzzle_io import PuzzleSpec, load_puzzles
from linepuzzle.visualization.save_outputs import save_all_outputs


def process_puzzle(spec: PuzzleSpec, debug_draw: bool = False, seed=None) -> bool:
    """
    Runs the complete check for one puzzle file:
      1. Graph validation
      2. Boundary generation
      3. Element placement check
      4. Test every listed solution against its expected outcome
      5. Save debug images (optional)

    Returns True if the puzzle initialized and every solution behaved as
    expected.
    """

    print(f"\n=== Processing puzzle: {spec.name} ===")
    engine = PuzzleEngine(spec.graph, spec.elements, rng=random.Random(seed), name=spec.name)

    # ------------------------------
    # STEP 1-3 — INIT
    # ------------------------------
    if not engine.init():
        for err in engine.init_errors:
            print(f"[ERROR] {type(err).__name__}: {err}")
        return False

    print(f"Boundary: {len(engine.boundary.vertices)} nodes, "
          f"bounds {engine.bounds_low} -> {engine.bounds_high}")

    # ------------------------------
    # STEP 4 — TEST SOLUTIONS
    # ------------------------------
    all_ok = True
    attempts = []
    for i, solution in enumerate(spec.solutions):
        try:
            path = spec.resolve_path(solution.path)
        except PuzzleFormatError as e:
            print(f"[ERROR] {e}")
            all_ok = False
            continue

        passed, regions = engine.test(path)
        attempts.append((path, regions))

        verdict = "PASS" if passed else "FAIL"
        if passed == solution.expect:
            print(f"[OK] solution {i}: {verdict} ({len(regions)} regions)")
        else:
            expected = "PASS" if solution.expect else "FAIL"
            print(f"[WARN] solution {i}: {verdict}, expected {expected}")
            all_ok = False

    # ------------------------------
    # STEP 5 — SAVE OUTPUTS
    # ------------------------------
    if debug_draw:
        written = save_all_outputs(OUTPUT_FOLDER, spec.name, engine, attempts)
        print(f"Saved {len(written)} debug images to {OUTPUT_FOLDER}")

    print(f"[OK] Finished {spec.name}" if all_ok else f"[FAIL] Finished {spec.name}")
    return all_ok


def main(argv=None):
    """
    Main entry point:
      - Loads puzzles
      - Checks each one independently
      - Prints a summary
    """
    params = get_active_params()

    ap = argparse.ArgumentParser(description="Validate line puzzles and their solutions")
    ap.add_argument("pattern", nargs="?", default=PUZZLE_PATTERN, help="Glob pattern of puzzle YAML files")
    ap.add_argument("--draw", action="store_true", default=DEBUG_DRAW, help="Save debug images")
    ap.add_argument("--seed", type=int, default=params["RANDOM_SEED"], help="Seed for region growth")
    ap.add_argument("--log-level", default=params["LOG_LEVEL"])
    args = ap.parse_args(argv)

    configure_logging(args.log_level.upper())

    try:
        specs, names = load_puzzles(args.pattern)
    except PuzzleFormatError as e:
        print(f"[ERROR] {e}")
        return 1

    if not specs:
        print(f"[ERROR] No puzzles matched pattern: {args.pattern}")
        return 1

    failures = 0
    for spec in specs:
        if not process_puzzle(spec, debug_draw=args.draw, seed=args.seed):
            failures += 1

    print(f"\n=== All puzzles processed: {len(specs) - failures}/{len(specs)} ok ===")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
