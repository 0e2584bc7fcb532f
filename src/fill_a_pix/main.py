"""Fill-a-Pix viewer and solver.

Loads a puzzle file and either opens a pygame window where the solver can be
watched step by step, or (``--mode solve``) runs the solver headless and
prints the resulting picture.
"""

from __future__ import annotations

import argparse
import logging

from fill_a_pix.engine import solve
from fill_a_pix.grid import PictureGrid, UNSOLVED
from fill_a_pix.puzzle import PuzzleError, load_puzzle
from fill_a_pix.session import SolveSession


def run_solve(grid: PictureGrid) -> int:
    passes = solve(grid)
    print(grid.to_text())
    print()
    print("Solver run complete")
    print(f"- passes: {passes}")
    print(f"- unsolved cells: {grid.count(UNSOLVED)}")
    return 0


def run_view(grid: PictureGrid, args: argparse.Namespace) -> int:
    from fill_a_pix.viewer import PictureGridViewer

    session = SolveSession(grid, steps_per_tick=args.steps_per_tick)
    viewer = PictureGridViewer(
        session,
        window_size=(args.window_width, args.window_height),
        render_fps=args.render_fps,
    )
    try:
        viewer.run()
    except KeyboardInterrupt:
        print("Closed.")
    finally:
        viewer.close()
    return 0


# ---------- CLI ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Fill-a-Pix viewer and constraint propagation solver")
    p.add_argument("puzzle", help="Puzzle JSON file")
    p.add_argument(
        "--mode",
        choices=["view", "solve"],
        default="view",
        help="view: interactive pygame window; solve: run to fixpoint and print the grid",
    )
    p.add_argument("--steps-per-tick", type=int, default=1, help="Solver steps per rendered frame")
    p.add_argument("--render-fps", type=float, default=60.0, help="Frames per second (0 = unlimited)")
    p.add_argument("--window-width", type=int, default=640, help="Window width in pixels")
    p.add_argument("--window-height", type=int, default=400, help="Window height in pixels")
    p.add_argument("--verbose", action="store_true", help="Log solver passes and steps")
    return p


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"Loading {args.puzzle}...")
    try:
        grid = load_puzzle(args.puzzle)
    except PuzzleError as e:
        print(f"Unable to load {args.puzzle}: {e}")
        raise SystemExit(e.exit_code)
    print(f"{args.puzzle} loaded ({grid.width}x{grid.height})")

    if args.mode == "solve":
        raise SystemExit(run_solve(grid))
    raise SystemExit(run_view(grid, args))


if __name__ == "__main__":
    main()
