# src/retro_chip8/arch/chip8/keypad.py
"""
CHIP-8の16キー入力デバイス。
"""
from typing import Dict, List, Optional

from retro_chip8.arch.chip8.constants import KEY_COUNT

# @intent:responsibility 現在押下されている論理キー (0x0-0xF) の集合を押下順で保持します。
class Keypad:
    """
    ホストから通知されたキーの押下/解放を保持するキーパッド。
    押下順は「最初に押されたキー」を決めるために保持されます (LD Vx, K)。
    """
    def __init__(self):
        self._held: Dict[int, None] = {}

    @staticmethod
    def _validate(key: int) -> None:
        if not isinstance(key, int) or not 0 <= key < KEY_COUNT:
            raise ValueError(f"Key {key!r} is not a valid CHIP-8 key (0x0-0xF).")

    # @intent:responsibility キーを押下状態にします。既に押下中なら何もしません（冪等）。
    def press(self, key: int) -> None:
        self._validate(key)
        if key not in self._held:
            self._held[key] = None

    # @intent:responsibility キーを解放します。押下されていなければ何もしません。
    def release(self, key: int) -> None:
        self._validate(key)
        self._held.pop(key, None)

    def set_state(self, key: int, pressed: bool) -> None:
        if pressed:
            self.press(key)
        else:
            self.release(key)

    # @intent:rationale 命令 (SKP/SKNP) はレジスタ値をそのまま渡すため、範囲外の値は例外ではなく「押されていない」と扱う。
    def is_pressed(self, key: int) -> bool:
        return key in self._held

    def first_pressed(self) -> Optional[int]:
        return next(iter(self._held), None)

    def any_pressed(self) -> bool:
        return bool(self._held)

    def held_keys(self) -> List[int]:
        return list(self._held)
