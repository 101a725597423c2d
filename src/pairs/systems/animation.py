import math

from esper import World

from pairs.components.animation_flip import FlipAnimation
from pairs.components.animation_win import WinPulse
from pairs.constants import FLIP_DURATION, WIN_PULSE_GROW, WIN_PULSE_SCALE, WIN_PULSE_SETTLE
from pairs.events.bus import (
    EventBus,
    EVENT_TICK,
    EVENT_CARD_REVEALED,
    EVENT_CARD_HIDDEN,
    EVENT_GAME_WON,
    EVENT_BOARD_CLEARED,
)


class AnimationSystem:
    """Drives card flip tweens and the win pulse; each animation is its own component."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_CARD_REVEALED, self.on_card_revealed)
        event_bus.subscribe(EVENT_CARD_HIDDEN, self.on_card_hidden)
        event_bus.subscribe(EVENT_GAME_WON, self.on_game_won)
        event_bus.subscribe(EVENT_BOARD_CLEARED, self.on_board_cleared)

    def on_card_revealed(self, sender, **kwargs):
        index = kwargs.get('index')
        if index is not None:
            self._start_flip(index, to_face=True)

    def on_card_hidden(self, sender, **kwargs):
        index = kwargs.get('index')
        if index is not None:
            self._start_flip(index, to_face=False)

    def on_game_won(self, sender, **kwargs):
        for ent, _ in list(self.world.get_component(WinPulse)):
            self.world.delete_entity(ent, immediate=True)
        self.world.create_entity(WinPulse())

    def on_board_cleared(self, sender, **kwargs):
        stale = [ent for ent, _ in self.world.get_component(FlipAnimation)]
        stale.extend(ent for ent, _ in self.world.get_component(WinPulse))
        for ent in stale:
            self.world.delete_entity(ent, immediate=True)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        finished = []
        for ent, flip in self.world.get_component(FlipAnimation):
            flip.progress += dt / FLIP_DURATION
            if flip.progress >= 1.0:
                flip.progress = 1.0
                finished.append(ent)
        for ent, pulse in self.world.get_component(WinPulse):
            pulse.elapsed += dt
            if pulse.phase == 'grow':
                t = min(1.0, pulse.elapsed / WIN_PULSE_GROW)
                pulse.scale = 1.0 + (WIN_PULSE_SCALE - 1.0) * ease_out_back(t)
                if t >= 1.0:
                    pulse.phase = 'settle'
                    pulse.elapsed = 0.0
            elif pulse.phase == 'settle':
                t = min(1.0, pulse.elapsed / WIN_PULSE_SETTLE)
                pulse.scale = WIN_PULSE_SCALE + (1.0 - WIN_PULSE_SCALE) * ease_in_sine(t)
                if t >= 1.0:
                    pulse.scale = 1.0
                    pulse.phase = 'done'
                    finished.append(ent)
        for ent in finished:
            self.world.delete_entity(ent, immediate=True)

    def flip_for(self, index: int) -> FlipAnimation | None:
        for _, flip in self.world.get_component(FlipAnimation):
            if flip.index == index:
                return flip
        return None

    def board_scale(self) -> float:
        for _, pulse in self.world.get_component(WinPulse):
            return pulse.scale
        return 1.0

    def _start_flip(self, index: int, *, to_face: bool):
        stale = [ent for ent, flip in self.world.get_component(FlipAnimation) if flip.index == index]
        for ent in stale:
            self.world.delete_entity(ent, immediate=True)
        self.world.create_entity(FlipAnimation(index=index, to_face=to_face))


def flip_shows_face(flip: FlipAnimation) -> bool:
    """Face texture is visible in the second half of a face-up flip and the first half of a face-down one."""
    if flip.to_face:
        return flip.progress >= 0.5
    return flip.progress < 0.5


def flip_width_factor(flip: FlipAnimation) -> float:
    # Rotation about the vertical axis, projected onto the screen.
    return abs(math.cos(math.pi * flip.progress))


def ease_out_back(t: float) -> float:
    c1 = 1.70158
    c3 = c1 + 1
    return 1 + c3 * (t - 1) ** 3 + c1 * (t - 1) ** 2


def ease_in_sine(t: float) -> float:
    return 1 - math.cos((t * math.pi) / 2)
