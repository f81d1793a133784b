# src/scroll_pygame.py
"""
Nature Scroll - meditative parallax meadow
==========================================

Window, input and UI glue around the scene core. Arrow keys scroll by hand
when autoscroll is off; ``A`` or the corner button toggles autoscroll.
"""
from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from nature_scroll.core.camera import Direction
from nature_scroll.core.config import RENDER_CFG, SCENE_CFG
from nature_scroll.core.logging_utils import RunLogger, SceneRecorder
from nature_scroll.core.model import TickInputs, initialize_scene, tick
from nature_scroll.core.timekeeping import FpsMeter, FrameTimer
from nature_scroll.render import (
    Button,
    ButtonVisualStyle,
    Compositor,
    build_text_panel,
    get_text_surface,
    load_font,
)

FONT_NAMES = ("georgia", "dejavuserif", "timesnewroman")
HUD_FONT_NAMES = ("consolas", "dejavusansmono", "couriernew")


def read_direction(pressed) -> Direction:
    """Level-triggered arrow state; opposing keys cancel out."""

    left = bool(pressed[pygame.K_LEFT])
    right = bool(pressed[pygame.K_RIGHT])
    if left and not right:
        return Direction.LEFT
    if right and not left:
        return Direction.RIGHT
    return Direction.NONE


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Meditative parallax nature scroll.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for particles and stars")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap (default: 60)")
    parser.add_argument(
        "--record",
        action="store_true",
        help="Record camera, time of day and symbol events to data/runs/",
    )
    parser.add_argument(
        "--runs-dir",
        type=Path,
        default=Path("data/runs"),
        help="Where recorded runs are written (default: data/runs)",
    )
    parser.add_argument("--manual", action="store_true", help="Start with autoscroll off")
    parser.add_argument("--no-card", action="store_true", help="Skip the start card")
    parser.add_argument("--hud", action="store_true", help="Show FPS and time of day")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    pygame.init()
    pygame.display.set_caption("Nature Scroll")
    width, height = SCENE_CFG.viewport_width, SCENE_CFG.viewport_height
    screen = pygame.display.set_mode((width, height))
    clock = pygame.time.Clock()

    title_font = load_font(FONT_NAMES, 28, bold=True)
    body_font = load_font(FONT_NAMES, 16)
    button_font = load_font(FONT_NAMES, 14)
    hud_font = load_font(HUD_FONT_NAMES, 13)

    scene = initialize_scene(SCENE_CFG.world_width, width, height, seed=args.seed)
    compositor = Compositor.for_scene(scene, RENDER_CFG)
    frame_timer = FrameTimer()
    fps_meter = FpsMeter()

    recorder: SceneRecorder | None = None
    if args.record:
        logger = RunLogger(args.runs_dir)
        logger.write_meta(
            {
                "world_width": scene.cfg.world_width,
                "viewport": [width, height],
                "seed": scene.seed,
                "auto_speed": scene.cfg.auto_speed,
                "manual_speed": scene.cfg.manual_speed,
            }
        )
        recorder = SceneRecorder(logger)
        print(f"Recording run to {logger.run_dir}")

    autoscroll_enabled = not args.manual
    state = "running" if args.no_card else "card"

    def toggle_autoscroll() -> None:
        nonlocal autoscroll_enabled
        autoscroll_enabled = not autoscroll_enabled

    button_style = ButtonVisualStyle(
        base_color=RENDER_CFG.button_color,
        hover_color=RENDER_CFG.button_hover_color,
        text_color=RENDER_CFG.button_text_color,
        radius=RENDER_CFG.button_radius,
        border_color=RENDER_CFG.button_border_color,
        border_width=1,
    )
    autoscroll_button = Button(
        (width - 150, 12, 138, 32),
        "",
        toggle_autoscroll,
        text_getter=lambda: "Autoscroll: on" if autoscroll_enabled else "Autoscroll: off",
        style=button_style,
    )
    start_card = build_text_panel(
        body_font,
        [
            ("Nature Scroll", RENDER_CFG.card_title_color),
            ("Drift from afternoon into night.", RENDER_CFG.card_text_color),
            ("Four glowing symbols hide along the way.", RENDER_CFG.card_text_color),
            ("", RENDER_CFG.card_text_color),
            ("Arrows scroll when autoscroll is off  -  A toggles it", RENDER_CFG.card_text_color),
            ("Click or press Space to begin", RENDER_CFG.card_text_color),
        ],
        background_color=RENDER_CFG.card_background_color,
        title_font=title_font,
    )

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif state == "card" and event.key in (pygame.K_SPACE, pygame.K_RETURN):
                        state = "running"
                    elif event.key == pygame.K_a:
                        toggle_autoscroll()
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if state == "card":
                        if event.button == 1:
                            state = "running"
                    else:
                        autoscroll_button.handle_event(event)

            if state == "running":
                inputs = TickInputs(
                    autoscroll_enabled=autoscroll_enabled,
                    direction=read_direction(pygame.key.get_pressed()),
                )
                tick(scene, inputs)
                if recorder is not None:
                    recorder.record(scene, autoscroll_enabled)

            compositor.render(screen, scene, RENDER_CFG)

            if state == "card":
                screen.blit(start_card, start_card.get_rect(center=(width // 2, height // 2)))
            else:
                autoscroll_button.draw(screen, button_font)

            fps_meter.add(frame_timer.tick())
            if args.hud:
                hud = get_text_surface(
                    hud_font,
                    f"FPS {fps_meter.fps:5.1f}  x {scene.camera.position:7.1f}  tod {scene.tod:.3f}",
                    RENDER_CFG.hud_text_color,
                ).copy()
                hud.set_alpha(RENDER_CFG.hud_text_alpha)
                screen.blit(hud, hud.get_rect(bottomleft=(10, height - 8)))

            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        if recorder is not None:
            recorder.logger.close()
        pygame.quit()


if __name__ == "__main__":
    main()
