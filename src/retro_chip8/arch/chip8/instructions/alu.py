# src/retro_chip8/arch/chip8/instructions/alu.py
"""
算術論理演算命令の実装。

フラグを設定する命令では、結果をVxに書き込んだ後にVFを書き込みます。
そのため x が 0xF の場合はフラグ値が残ります。
"""
import random

from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import Chip8Operation

# --- ADD Vx, byte (7xkk) ---
# @intent:note 8bitでラップアラウンドし、VFは変更しない。
def execute_add_vx_byte(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.v[op.x] = (state.v[op.x] + op.nn) & 0xFF

# --- OR Vx, Vy (8xy1) ---
def execute_or_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.v[op.x] = state.v[op.x] | state.v[op.y]

# --- AND Vx, Vy (8xy2) ---
def execute_and_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.v[op.x] = state.v[op.x] & state.v[op.y]

# --- XOR Vx, Vy (8xy3) ---
def execute_xor_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.v[op.x] = state.v[op.x] ^ state.v[op.y]

# --- ADD Vx, Vy (8xy4) ---
# @intent:responsibility Vx + Vy を格納し、桁あふれ時に VF=1、それ以外は VF=0 とします。
def execute_add_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    res = state.v[op.x] + state.v[op.y]
    state.v[op.x] = res & 0xFF
    state.vf = 1 if res > 0xFF else 0

# --- SUB Vx, Vy (8xy5) ---
# @intent:responsibility Vx - Vy を格納し、ボローが無い (Vx >= Vy) 場合に VF=1 とします。
def execute_sub_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    v1 = state.v[op.x]
    v2 = state.v[op.y]
    state.v[op.x] = (v1 - v2) & 0xFF
    state.vf = 1 if v1 >= v2 else 0

# --- SUBN Vx, Vy (8xy7) ---
# @intent:responsibility Vy - Vx を格納し、ボローが無い (Vy >= Vx) 場合に VF=1 とします。
def execute_subn_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    v1 = state.v[op.x]
    v2 = state.v[op.y]
    state.v[op.x] = (v2 - v1) & 0xFF
    state.vf = 1 if v2 >= v1 else 0

# @intent:utility_function シフト命令の入力元レジスタの値を返します (Quirk: Vy または Vx)。
def _shift_source(state: Chip8CpuState, op: Chip8Operation) -> int:
    return state.v[op.y] if state.quirks.shift_uses_vy else state.v[op.x]

# --- SHR Vx, Vy (8xy6) ---
# @intent:responsibility 入力元を1bit右シフトしてVxに格納し、シフト前の最下位bitをVFに設定します。
def execute_shr_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    src = _shift_source(state, op)
    state.v[op.x] = src >> 1
    state.vf = src & 0x01

# --- SHL Vx, Vy (8xyE) ---
# @intent:responsibility 入力元を1bit左シフトしてVxに格納し、シフト前の最上位bitをVFに設定します。
def execute_shl_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    src = _shift_source(state, op)
    state.v[op.x] = (src << 1) & 0xFF
    state.vf = (src >> 7) & 0x01

# --- ADD I, Vx (Fx1E) ---
# @intent:responsibility I に Vx を加算します (16bitでラップ)。
# @intent:rationale I >= 0x1000 で VF=1 とするが、範囲内の場合に VF を 0 にはしない。
#                  index_overflow_sets_vf が False の場合は VF に一切触れない。
def execute_add_i_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.i = (state.i + state.v[op.x]) & 0xFFFF
    if state.quirks.index_overflow_sets_vf and state.i >= 0x1000:
        state.vf = 1

# --- RND Vx, byte (Cxkk) ---
def execute_rnd_vx_byte(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.v[op.x] = random.randint(0, 0xFF) & op.nn
