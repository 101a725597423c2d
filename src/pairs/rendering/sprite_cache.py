from __future__ import annotations

from pathlib import Path
from typing import Any

BACK_TEXTURE_NAME = "back"


class SpriteCache:
    """Loads and caches smoothed card textures from graphics/cards/<name>.png."""

    def __init__(self, texture_dir: Path):
        self._texture_dir = Path(texture_dir)
        self._smoothed_texture_cache: dict[tuple[str, int | None], Any] = {}
        self._missing: set[str] = set()

    def texture_path(self, name: str) -> Path:
        return self._texture_dir / f"{name}.png"

    def get_card_texture(self, arcade_module, symbol_id: str, *, max_dim: int | None = 128):
        """Face texture for a symbol, or None so the caller falls back to a flat colour."""
        return self._get_named_texture(arcade_module, symbol_id, max_dim=max_dim)

    def get_back_texture(self, arcade_module, *, max_dim: int | None = 128):
        return self._get_named_texture(arcade_module, BACK_TEXTURE_NAME, max_dim=max_dim)

    def _get_named_texture(self, arcade_module, name: str, *, max_dim: int | None):
        if not name or name in self._missing:
            return None
        texture_path = self.texture_path(name)
        if not texture_path.exists():
            self._missing.add(name)
            return None
        return self._load_smoothed_texture(arcade_module, texture_path, max_dim=max_dim)

    def _load_smoothed_texture(self, arcade_module, path: Path, max_dim: int | None = None):
        from PIL import Image

        key = (str(path), max_dim)
        cached = self._smoothed_texture_cache.get(key)
        if cached is not None:
            return cached
        try:
            img = Image.open(path).convert("RGBA")
        except OSError:
            self._missing.add(path.stem)
            return None
        if max_dim is not None and max(img.size) > max_dim:
            w, h = img.size
            scale = max_dim / max(w, h)
            new_w = max(1, int(w * scale))
            new_h = max(1, int(h * scale))
            img = img.resize((new_w, new_h), Image.Resampling.LANCZOS)
        try:
            texture = arcade_module.Texture(img, hash=f"smooth:{path.name}:{max_dim}")
        except Exception:
            cache_file = path.parent / f"._smooth_cache_{path.stem}_{max_dim or 'orig'}.png"
            try:
                img.save(cache_file)
                texture = arcade_module.load_texture(cache_file)
            except Exception:
                return None
        self._smoothed_texture_cache[key] = texture
        return texture
