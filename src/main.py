"""Entry point for the Pairs memory-matching game.

Sets up the game session (ECS world, event bus, core systems) and the Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from pairs.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from pairs.events.bus import EVENT_TICK, EVENT_MOUSE_PRESS, EVENT_KEY_PRESS
from pairs.session import GameSession
from pairs.systems.animation import AnimationSystem
from pairs.systems.input import InputSystem
from pairs.systems.render import RenderSystem


class PairsWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.session = GameSession()
        self.event_bus = self.session.event_bus
        self.world = self.session.world

        # Presentation systems subscribe before initialize() so they see the first layout and score.
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.animation_system)
        self.input_system = InputSystem(self.event_bus, self, self.world)

        self.session.initialize()
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)

    def on_close(self):
        self.session.shutdown()
        super().on_close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = PairsWindow()
    run()

if __name__ == "__main__":
    main()
