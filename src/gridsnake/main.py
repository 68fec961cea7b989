# src/gridsnake/main.py
import argparse
import logging
from typing import Optional

import pygame # type: ignore

from .config import FPS, Boundary, Direction, GameConfig
from .loop import GameLoop, LoopState, Snapshot
from .render import PygameRenderer, result_regions

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.NORTH,
    pygame.K_w: Direction.NORTH,
    pygame.K_RIGHT: Direction.EAST,
    pygame.K_d: Direction.EAST,
    pygame.K_DOWN: Direction.SOUTH,
    pygame.K_s: Direction.SOUTH,
    pygame.K_LEFT: Direction.WEST,
    pygame.K_a: Direction.WEST,
}


def handle_input(game: GameLoop) -> bool:
    """Route pygame events into the loop. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_r and game.state is LoopState.TERMINAL:
                game.restart()
            elif event.key in KEY_DIRECTIONS:
                game.on_direction(KEY_DIRECTIONS[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN:
            game.on_pointer_down(event.pos[0], event.pos[1], event.button)
    return True


def build_parser() -> argparse.ArgumentParser:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--start-length", type=int, default=defaults.start_length)
    parser.add_argument("--growth", type=int, default=defaults.growth,
                        help="segments gained per food")
    parser.add_argument("--tick-ms", type=int, default=defaults.tick_ms,
                        help="milliseconds between snake moves")
    parser.add_argument("--wrap", action="store_true",
                        help="wrap around the edges instead of dying on the wall")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        width=args.width,
        height=args.height,
        start_length=args.start_length,
        growth=args.growth,
        tick_ms=args.tick_ms,
        boundary=Boundary.WRAP if args.wrap else Boundary.WALL,
        seed=args.seed,
    )


def main(argv: Optional[list] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    window = cfg.window_size()
    screen = pygame.display.set_mode(window)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    game = GameLoop(cfg)
    renderer = PygameRenderer(screen, font, game.regions)
    game.renderer = renderer

    def on_end(snap: Snapshot) -> None:
        for region in result_regions(window, game.restart, font):
            game.regions.push(region)

    game.on_end = on_end
    game.start()

    running = True
    clock.tick(args.fps)
    while running:
        # 1) input
        running = handle_input(game)
        if not running:
            break

        # 2) update + render
        game.frame(clock.tick(args.fps))
        pygame.display.flip()

    pygame.quit()
    if game.session is not None:
        print(f"Games played: {game.games_played}, last score: {game.session.score}")


if __name__ == "__main__":
    main()
