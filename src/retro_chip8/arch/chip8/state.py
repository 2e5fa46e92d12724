# src/retro_chip8/arch/chip8/state.py
"""
CHIP-8 固有の状態定義。
"""
from dataclasses import dataclass, field
from typing import List

from retro_chip8.core.state import CpuState
from retro_chip8.config.models import QuirkConfig
from retro_chip8.arch.chip8.constants import PROGRAM_START, REGISTER_COUNT, FLAG_REGISTER
from retro_chip8.arch.chip8.display import Framebuffer
from retro_chip8.arch.chip8.keypad import Keypad

# @intent:responsibility CHIP-8の全てのレジスタ、スタック、タイマー、キーパッド、フレームバッファの状態を保持します。
# @intent:rationale メモリはBus上のRAMが保持し、それ以外のマシン状態は全てこのデータクラスに集約します。
#                  リセット時はこのインスタンスを丸ごと作り直し、部分的な再構築は行いません。
@dataclass
class Chip8CpuState(CpuState):
    """
    CHIP-8のマシン状態を保持するデータクラス。
    """
    pc: int = PROGRAM_START
    v: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)  # V0-VF
    i: int = 0x0000           # Index Register
    stack: List[int] = field(default_factory=list)
    delay_timer: int = 0
    sound_timer: int = 0
    keypad: Keypad = field(default_factory=Keypad)
    framebuffer: Framebuffer = field(default_factory=Framebuffer)
    quirks: QuirkConfig = field(default_factory=QuirkConfig)

    # @intent:accessor VFレジスタ（フラグ）へのアクセスを提供します。
    @property
    def vf(self) -> int:
        return self.v[FLAG_REGISTER]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[FLAG_REGISTER] = value & 0xFF
