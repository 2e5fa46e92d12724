# src/retro_chip8/arch/chip8/cpu.py
"""
CHIP-8 エミュレーションの中心モジュール。

ホストドライバは以下の操作でコアを駆動します。
  - load_rom(data)          : ROMをプログラム領域 (0x200-) にロード
  - tick_instruction()      : 1命令のフェッチ→デコード→実行
  - tick_timers()           : 60Hzのタイマー減算を1回
  - set_key_state(key, on)  : キーの押下/解放
  - get_framebuffer()       : 描画用フレームバッファの参照
"""
import logging
from typing import Dict, List, Optional, Tuple

from retro_chip8.core.cpu import AbstractCpu
from retro_chip8.core.errors import ProgramCounterError
from retro_chip8.core.snapshot import Snapshot
from retro_chip8.common.types import RegisterLayoutInfo, RegisterInfo, Cell
from retro_chip8.config.models import QuirkConfig
from retro_chip8.transport.bus import Bus
from retro_chip8.loader.loader import RomLoader
from retro_chip8.arch.chip8.constants import FONT_ADDRESS, FONT_SET, MEMORY_SIZE, REGISTER_COUNT
from retro_chip8.arch.chip8.display import FramebufferView
from retro_chip8.arch.chip8.state import Chip8CpuState
from retro_chip8.arch.chip8.instructions import (
    Chip8Operation, InstructionKind, decode_opcode, execute_instruction,
)

logger = logging.getLogger(__name__)

# @intent:responsibility CHIP-8の具体的なエミュレーションロジック（フェッチ、デコード、実行、タイマー、入力）を提供します。
class Chip8Cpu(AbstractCpu):
    """
    CHIP-8 仮想マシンをエミュレートするクラス。
    命令の実行は状態を持たない命令関数群に委譲し、このクラスはマシン状態とバスの所有と駆動のみを行います。
    """
    def __init__(self, bus: Bus, quirks: Optional[QuirkConfig] = None):
        self._quirks = quirks or QuirkConfig()
        super().__init__(bus)
        self._loader = RomLoader()
        self.unknown_opcode_count = 0
        self._install_font()

    def _create_initial_state(self) -> Chip8CpuState:
        return Chip8CpuState(quirks=self._quirks)

    # @intent:responsibility 組み込みフォントをメモリの 0x050-0x09F に配置します。
    def _install_font(self) -> None:
        self._bus.load(FONT_ADDRESS, FONT_SET)

    # @intent:responsibility マシン状態全体（レジスタ、スタック、タイマー、キーパッド、画面、メモリ）を作り直します。
    # @intent:rationale 部分的な再初期化による古い状態の残留を避けるため、状態は丸ごと置き換えます。
    def reset(self) -> None:
        super().reset()
        self._bus.clear()
        self._install_font()
        self.unknown_opcode_count = 0
        logger.debug("CHIP-8 machine reset.")

    def get_state(self) -> Chip8CpuState:
        return self._state

    @property
    def quirks(self) -> QuirkConfig:
        return self._quirks

    # --- ホスト → コア ---

    # @intent:responsibility ROMイメージをプログラム領域にロードします。
    # @intent:post-condition サイズ超過時はRomTooLargeErrorを送出し、メモリは変更されません。
    def load_rom(self, data: bytes) -> int:
        return self._loader.load_bytes(data, self._bus)

    def tick_instruction(self) -> Snapshot:
        """1命令を実行します。step() の別名です。"""
        return self.step()

    # @intent:responsibility 遅延タイマーとサウンドタイマーを1ずつ減算します（0未満にはならない）。
    def tick_timers(self) -> None:
        s = self._state
        if s.delay_timer > 0:
            s.delay_timer -= 1
        if s.sound_timer > 0:
            s.sound_timer -= 1

    def set_key_state(self, key: int, pressed: bool) -> None:
        self._state.keypad.set_state(key, pressed)

    def press_key(self, key: int) -> None:
        self._state.keypad.press(key)

    def release_key(self, key: int) -> None:
        self._state.keypad.release(key)

    # --- コア → ホスト ---

    # @intent:responsibility 描画用に、現在の画面の読み取り専用ビューを返します。
    # @intent:note reset() で画面は作り直されるため、リセット後は再取得すること。
    def get_framebuffer(self) -> FramebufferView:
        return FramebufferView(self._state.framebuffer)

    def get_and_clear_display_changes(self) -> List[Cell]:
        return self._state.framebuffer.get_and_clear_changes()

    def get_timers(self) -> Tuple[int, int]:
        """(delay, sound) を返します。"""
        return self._state.delay_timer, self._state.sound_timer

    def is_sound_active(self) -> bool:
        return self._state.sound_timer > 0

    # --- 命令サイクル ---

    # @intent:responsibility PCが指す2バイトをビッグエンディアンで読み出し、PCを2進めます。
    # @intent:pre-condition PCと PC+1 がメモリ範囲内であること。範囲外ならProgramCounterErrorを送出し、状態は変更しません。
    def _fetch(self) -> int:
        pc = self._state.pc
        limit = min(self._bus.get_address_limit(), MEMORY_SIZE)
        if not 0 <= pc < limit - 1:
            raise ProgramCounterError(pc, limit)
        word = (self._bus.read(pc) << 8) | self._bus.read(pc + 1)
        self._state.pc = (pc + 2) & 0xFFFF
        return word

    def _decode(self, opcode: int) -> Chip8Operation:
        return decode_opcode(opcode)

    def _execute(self, operation: Chip8Operation) -> None:
        if operation.kind is InstructionKind.UNKNOWN:
            self.unknown_opcode_count += 1
            logger.debug("Unknown opcode %s at %#06x ignored.", operation.opcode_hex, self._state.pc - 2)
        execute_instruction(operation, self._state, self._bus)

    # --- インスペクション ---

    # @intent:responsibility ホスト表示用に、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        registers = {f"V{r:X}": s.v[r] for r in range(REGISTER_COUNT)}
        registers.update({
            "I": s.i, "PC": s.pc, "SP": len(s.stack), "DT": s.delay_timer, "ST": s.sound_timer
        })
        return registers

    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        return [
            RegisterLayoutInfo("General", [RegisterInfo(f"V{r:X}", 8) for r in range(REGISTER_COUNT)]),
            RegisterLayoutInfo("Pointers", [
                RegisterInfo("I", 16), RegisterInfo("PC", 16), RegisterInfo("SP", 8)
            ]),
            RegisterLayoutInfo("Timers", [
                RegisterInfo("DT", 8), RegisterInfo("ST", 8)
            ]),
        ]

    # @intent:rationale CHIP-8に独立したフラグレジスタは無いため、VFの値とサウンド出力状態を提供します。
    def get_flag_state(self) -> Dict[str, bool]:
        s = self._state
        return {"VF": s.vf != 0, "SOUND": s.sound_timer > 0}
