# src/retro_chip8/arch/chip8/instructions/graphics.py
"""
表示命令（画面消去、スプライト描画）の実装。
"""
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8CpuState
from .base import Chip8Operation

# --- CLS (00E0) ---
def execute_cls(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    state.framebuffer.clear()

# --- DRW Vx, Vy, n (Dxyn) ---
# @intent:responsibility memory[I..I+n] のnバイトスプライトを (Vx mod 幅, Vy mod 高さ) にXOR描画します。
# @intent:rationale 開始座標のみ画面サイズで折り返し、画面外にはみ出した画素は折り返さずに捨てます。
#                  VFはループ前に0とし、点灯画素が消えた時にだけ1に上げます。
def execute_drw_vx_vy_n(state: Chip8CpuState, bus: Bus, op: Chip8Operation) -> None:
    fb = state.framebuffer
    # VFを0にする前に座標を読む (x または y が 0xF の場合に備える)
    x0 = state.v[op.x] % fb.width
    y0 = state.v[op.y] % fb.height
    state.vf = 0

    for row in range(op.n):
        sprite = bus.read(state.i + row)
        for bit in range(8):
            if not (sprite >> (7 - bit)) & 0x01:
                continue
            px = x0 + bit
            py = y0 + row
            if not fb.in_bounds(px, py):
                continue
            if fb.flip(px, py):
                state.vf = 1
