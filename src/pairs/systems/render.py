from pathlib import Path

from esper import World

from pairs.events.bus import (
    EventBus,
    EVENT_BOARD_READY,
    EVENT_SCORE_CHANGED,
    EVENT_GAME_WON,
)
from pairs.components.selection_state import SelectionPhase
from pairs.rendering.sprite_cache import SpriteCache
from pairs.systems.animation import AnimationSystem, flip_shows_face, flip_width_factor
from pairs.systems.board_ops import get_board, get_selection, get_symbol_registry, iter_cards
from pairs.ui.layout import BoardGeometry, compute_board_geometry, restart_button_rect

CARD_BACK_COLOR = (44, 62, 96)
CARD_OUTLINE_COLOR = (230, 230, 230)
MATCHED_OUTLINE_COLOR = (120, 220, 120)
TEXT_COLOR = (255, 255, 255)


class RenderSystem:
    """Presentation side of the core: grid layout, card faces, score text and win banner."""

    def __init__(self, world: World, event_bus: EventBus, window, animation_system: AnimationSystem | None = None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.animation_system = animation_system
        self.event_bus.subscribe(EVENT_BOARD_READY, self.on_board_ready)
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)
        self.event_bus.subscribe(EVENT_GAME_WON, self.on_game_won)
        self.match_text = "Matches: 0"
        self.total_text = "Total Try: 0"
        self.show_win_banner = False
        base_graphics_dir = Path(__file__).resolve().parents[3] / "graphics"
        self.sprite_cache = SpriteCache(base_graphics_dir / "cards")

    def on_board_ready(self, sender, **kwargs):
        self.show_win_banner = get_selection(self.world).phase == SelectionPhase.WON

    def on_score_changed(self, sender, **kwargs):
        self.match_text = f"Matches: {kwargs.get('match_count', 0)}"
        self.total_text = f"Total Try: {kwargs.get('total_attempts', 0)}"

    def on_game_won(self, sender, **kwargs):
        self.show_win_banner = True

    def geometry(self) -> BoardGeometry | None:
        board = get_board(self.world)
        if not board.cards:
            return None
        return compute_board_geometry(self.window.width, self.window.height, board.columns, board.card_count)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        try:
            arcade.get_window()
        except Exception:
            return
        geometry = self.geometry()
        if geometry is not None:
            self._draw_cards(arcade, geometry)
        self._draw_hud(arcade)

    def _draw_cards(self, arcade, geometry: BoardGeometry):
        registry = get_symbol_registry(self.world)
        scale = self.animation_system.board_scale() if self.animation_system else 1.0
        origin_x, origin_y = geometry.center_x, geometry.center_y
        for index, _, card in iter_cards(self.world):
            cx, cy = geometry.card_center(index)
            # Win pulse scales the whole grid around its centre.
            cx = origin_x + (cx - origin_x) * scale
            cy = origin_y + (cy - origin_y) * scale
            size = geometry.card_size * scale
            width = size
            show_face = card.is_face_up
            flip = self.animation_system.flip_for(index) if self.animation_system else None
            if flip is not None:
                show_face = flip_shows_face(flip)
                width = max(1.0, size * flip_width_factor(flip))
            rect = arcade.XYWH(cx, cy, width, size)
            if show_face:
                texture = self.sprite_cache.get_card_texture(arcade, card.symbol_id)
                if texture is not None:
                    arcade.draw_texture_rect(texture, rect)
                else:
                    arcade.draw_rect_filled(rect, registry.color_for(card.symbol_id))
            else:
                texture = self.sprite_cache.get_back_texture(arcade)
                if texture is not None:
                    arcade.draw_texture_rect(texture, rect)
                else:
                    arcade.draw_rect_filled(rect, CARD_BACK_COLOR)
            outline = MATCHED_OUTLINE_COLOR if card.is_matched else CARD_OUTLINE_COLOR
            arcade.draw_rect_outline(rect, outline, border_width=2)

    def _draw_hud(self, arcade):
        top = self.window.height - 30
        arcade.draw_text(self.match_text, 20, top, TEXT_COLOR, 18, anchor_y="center")
        arcade.draw_text(self.total_text, 220, top, TEXT_COLOR, 18, anchor_y="center")
        left, bottom, width, height = restart_button_rect(self.window.width, self.window.height)
        arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, arcade.color.DARK_SLATE_BLUE)
        arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, arcade.color.WHITE, border_width=2)
        arcade.draw_text(
            "Restart",
            left + width / 2,
            bottom + height / 2,
            TEXT_COLOR,
            18,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
        if self.show_win_banner:
            arcade.draw_text(
                "You found every pair!",
                self.window.width / 2,
                24,
                arcade.color.GOLD,
                24,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
