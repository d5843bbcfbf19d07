"""Play Breakout in a pygame window.

Mouse movement over the board steers the paddle, ←/→ nudge it, Enter starts,
Space pauses or resumes, R restarts and Esc quits. The buttons under the
board do the same as Enter, Space and R.
"""

import argparse
import logging
import sys

import pygame

from breakout.game import Game, GameState
from breakout.scheduler import FrameScheduler

logger = logging.getLogger("breakout")

BAR_HEIGHT = 50
COLOR_BAR = (30, 30, 40)
COLOR_BUTTON = (78, 205, 196)
COLOR_BUTTON_TEXT = (0, 0, 0)
COLOR_HUD = (235, 235, 235)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="breakout", description="Classic Breakout.")
    parser.add_argument("--fps", type=int, default=60, help="frames per second (default: 60)")
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: INFO)",
    )
    return parser.parse_args(argv)


def make_buttons(width, top):
    labels = [("start", "Start"), ("pause", "Pause"), ("restart", "Restart")]
    button_w, button_h, gap = 110, 34, 12
    x = width - len(labels) * (button_w + gap)
    buttons = {}
    for name, label in labels:
        buttons[name] = (pygame.Rect(x, top + (BAR_HEIGHT - button_h) // 2, button_w, button_h), label)
        x += button_w + gap
    return buttons


def draw_bar(window, game, buttons, font):
    top = game.HEIGHT
    pygame.draw.rect(window, COLOR_BAR, (0, top, game.WIDTH, BAR_HEIGHT))

    hud = game.hud()
    text = font.render(f"Score: {hud['score']}   Lives: {hud['lives']}", True, COLOR_HUD)
    window.blit(text, text.get_rect(midleft=(16, top + BAR_HEIGHT // 2)))

    for name, (rect, label) in buttons.items():
        if name == "pause" and game.state == GameState.PAUSED:
            label = "Resume"
        elif name == "restart" and game.state in (GameState.GAME_OVER, GameState.WON):
            label = "Play Again"
        pygame.draw.rect(window, COLOR_BUTTON, rect, border_radius=6)
        caption = font.render(label, True, COLOR_BUTTON_TEXT)
        window.blit(caption, caption.get_rect(center=rect.center))


def handle_event(event, game, buttons):
    """Applies one pygame event to the game. Returns False when the player quits."""
    if event.type == pygame.QUIT:
        return False

    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        elif event.key == pygame.K_LEFT:
            game.move_paddle_left()
        elif event.key == pygame.K_RIGHT:
            game.move_paddle_right()
        elif event.key == pygame.K_SPACE:
            game.toggle_pause()
        elif event.key == pygame.K_RETURN:
            game.start_game()
        elif event.key == pygame.K_r:
            game.reset_game()

    elif event.type == pygame.MOUSEMOTION:
        x, y = event.pos
        if y < game.HEIGHT:
            game.pointer_move(x)

    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        actions = {"start": game.start_game, "pause": game.toggle_pause, "restart": game.reset_game}
        for name, (rect, _) in buttons.items():
            if rect.collidepoint(event.pos):
                actions[name]()
                break

    return True


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    scheduler = FrameScheduler()
    game = Game(
        scheduler=scheduler,
        on_finish=lambda result: print(f"{result.title} {result.message}"),
    )

    try:
        window = pygame.display.set_mode((game.WIDTH, game.HEIGHT + BAR_HEIGHT))
    except pygame.error:
        logger.exception("Could not open a window")
        raise
    pygame.display.set_caption("Breakout")
    pygame.key.set_repeat(200, 16)

    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 28)
    buttons = make_buttons(game.WIDTH, game.HEIGHT)

    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(event, game, buttons):
                running = False
                break

        # The game redraws itself on frames it runs; otherwise show the
        # current screen (menu prompt, pause veil or final result)
        if not scheduler.run_frame():
            game.render()

        window.blit(game.screen, (0, 0))
        draw_bar(window, game, buttons, font)
        pygame.display.flip()

        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
