# src/retro_chip8/arch/chip8/instructions/control.py
"""
制御命令（ジャンプ、サブルーチン、条件スキップ）の実装。
"""
import logging

from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import Chip8Operation, skip_next

logger = logging.getLogger(__name__)

# --- RET (00EE) ---
# @intent:responsibility スタックから戻りアドレスをポップしてPCに設定します。
# @intent:rationale スタックが空の場合はエラーにせず、PCを変更しません。
def execute_ret(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    if not state.stack:
        logger.debug("RET with empty call stack at %#06x; PC left unchanged.", state.pc)
        return
    state.pc = state.stack.pop()

# --- JP addr (1nnn) ---
def execute_jp_addr(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.pc = op.nnn

# --- CALL addr (2nnn) ---
# @intent:responsibility 戻りアドレス（フェッチ済みのため次の命令を指すPC）をプッシュしてからジャンプします。
# @intent:note 警告は深さがしきい値を初めて超えたCALLでのみ出す。
def execute_call_addr(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.stack.append(state.pc)
    if len(state.stack) == state.quirks.stack_depth_warning + 1:
        logger.warning("Call stack depth %d exceeds %d (CALL %#05x); deeper calls are not reported.",
                       len(state.stack), state.quirks.stack_depth_warning, op.nnn)
    state.pc = op.nnn

# --- SE Vx, byte (3xkk) ---
def execute_se_vx_byte(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    if state.v[op.x] == op.nn:
        skip_next(state)

# --- SNE Vx, byte (4xkk) ---
def execute_sne_vx_byte(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    if state.v[op.x] != op.nn:
        skip_next(state)

# --- SE Vx, Vy (5xy0) ---
def execute_se_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    if state.v[op.x] == state.v[op.y]:
        skip_next(state)

# --- SNE Vx, Vy (9xy0) ---
def execute_sne_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    if state.v[op.x] != state.v[op.y]:
        skip_next(state)

# --- JP V0, addr (Bnnn) ---
# @intent:note 0x0FFFを超えるアドレスも設定され得る。その場合は次のフェッチでProgramCounterErrorとなる。
def execute_jp_v0_addr(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.pc = (op.nnn + state.v[0]) & 0xFFFF

# --- SKP Vx (Ex9E) ---
def execute_skp_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    if state.keypad.is_pressed(state.v[op.x]):
        skip_next(state)

# --- SKNP Vx (ExA1) ---
def execute_sknp_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    if not state.keypad.is_pressed(state.v[op.x]):
        skip_next(state)

# --- 未定義命令 ---
# @intent:responsibility 未定義の命令語は何もしません（PCはフェッチ時に進んでいます）。
def execute_unknown(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    # Intentional: unmatched opcodes are a no-op
    pass
