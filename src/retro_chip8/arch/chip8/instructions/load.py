# src/retro_chip8/arch/chip8/instructions/load.py
"""
ロード/ストア命令（レジスタ、インデックス、タイマー、メモリ転送、キー待ち）の実装。
"""
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8CpuState
from retro_chip8.arch.chip8.constants import FONT_ADDRESS, FONT_GLYPH_SIZE
from .base import Chip8Operation

# --- LD Vx, byte (6xkk) ---
def execute_ld_vx_byte(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.v[op.x] = op.nn

# --- LD Vx, Vy (8xy0) ---
def execute_ld_vx_vy(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.v[op.x] = state.v[op.y]

# --- LD I, addr (Annn) ---
def execute_ld_i_addr(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.i = op.nnn

# --- LD Vx, DT (Fx07) ---
def execute_ld_vx_dt(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.v[op.x] = state.delay_timer

# --- LD Vx, K (Fx0A) ---
# @intent:responsibility 押下中のキーがあれば最初に押されたキーをVxに格納します。
#                        無ければPCを2戻し、次のティックで同じ命令を再フェッチさせます（ポーリング）。
def execute_ld_vx_k(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    key = state.keypad.first_pressed()
    if key is None:
        state.pc = (state.pc - 2) & 0xFFFF
        return
    state.v[op.x] = key

# --- LD DT, Vx (Fx15) ---
def execute_ld_dt_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.delay_timer = state.v[op.x]

# --- LD ST, Vx (Fx18) ---
def execute_ld_st_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.sound_timer = state.v[op.x]

# --- LD F, Vx (Fx29) ---
# @intent:responsibility Vxが示す16進フォントグリフのアドレス (0x050 + Vx*5) をIに設定します。
# @intent:note Vxはマスクしない。0x10以上ではフォント領域外を指す。
def execute_ld_f_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.i = FONT_ADDRESS + state.v[op.x] * FONT_GLYPH_SIZE

# --- LD B, Vx (Fx33) ---
# @intent:responsibility Vxの10進3桁 (百, 十, 一) を memory[I], [I+1], [I+2] に書き込みます。
def execute_ld_b_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    value = state.v[op.x]
    bus.write(state.i, value // 100)
    bus.write(state.i + 1, (value // 10) % 10)
    bus.write(state.i + 2, value % 10)

# --- LD [I], Vx (Fx55) ---
# @intent:note I自体は変更しない。
def execute_ld_i_vx(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    for r in range(op.x + 1):
        bus.write(state.i + r, state.v[r])

# --- LD Vx, [I] (Fx65) ---
def execute_ld_vx_i(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    for r in range(op.x + 1):
        state.v[r] = bus.read(state.i + r)
