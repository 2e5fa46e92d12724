# src/retro_chip8/arch/chip8/display.py
"""
CHIP-8の64x32モノクロフレームバッファ。
"""
from typing import Dict, List

from retro_chip8.common.types import Cell
from retro_chip8.arch.chip8.constants import DISPLAY_WIDTH, DISPLAY_HEIGHT

# @intent:responsibility 64x32のオン/オフ画素を `y*width+x` のフラット配列で保持し、変更セルを記録します。
class Framebuffer:
    """
    CHIP-8のフレームバッファ。
    画素の変更はDRW/CLS命令を通じてのみ行われ、ホストは読み取り専用で参照します。
    """
    def __init__(self, width: int = DISPLAY_WIDTH, height: int = DISPLAY_HEIGHT):
        self._width = width
        self._height = height
        self._pixels = bytearray(width * height)
        # 前回の問い合わせ以降に変化したセル (挿入順を保持する集合として dict を使う)
        self._changes: Dict[Cell, None] = {}

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_pixel(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) out of bounds for {self._width}x{self._height} display.")
        return self._pixels[y * self._width + x] == 1

    # @intent:responsibility 画素をXORで反転させ、点灯していた画素が消えた場合にTrue（衝突）を返します。
    # @intent:pre-condition (x, y) は画面内であること。画面外の書き込みを捨てるのは呼び出し側の責務です。
    def flip(self, x: int, y: int) -> bool:
        index = y * self._width + x
        was_on = self._pixels[index] == 1
        self._pixels[index] = 0 if was_on else 1
        self._changes[(x, y)] = None
        return was_on

    # @intent:responsibility 全画素を消灯します。
    def clear(self) -> None:
        for index, value in enumerate(self._pixels):
            if value:
                self._changes[(index % self._width, index // self._width)] = None
        self._pixels = bytearray(self._width * self._height)

    # @intent:responsibility 前回の呼び出し以降に変化したセルの一覧を返し、記録をクリアします。
    def get_and_clear_changes(self) -> List[Cell]:
        changes = list(self._changes)
        self._changes = {}
        return changes

    # @intent:responsibility 点灯している全セルの座標を返します。
    def lit_pixels(self) -> List[Cell]:
        return [(index % self._width, index // self._width)
                for index, value in enumerate(self._pixels) if value]

    def rows(self) -> List[List[bool]]:
        """行ごとの画素状態をboolの二次元リストで返します。"""
        w = self._width
        return [[v == 1 for v in self._pixels[y * w:(y + 1) * w]] for y in range(self._height)]

    def to_bytes(self) -> bytes:
        """フラット配列 (1画素1バイト, 0/1) のコピーを返します。"""
        return bytes(self._pixels)

    def __str__(self) -> str:
        return "\n".join("".join("#" if on else "." for on in row) for row in self.rows())

# @intent:responsibility ホストに渡すフレームバッファの読み取り専用ビューです。
# @intent:rationale 画素を変更する flip/clear は公開せず、画面の変更をDRW/CLS命令に限定します。
class FramebufferView:
    def __init__(self, framebuffer: Framebuffer):
        self._framebuffer = framebuffer

    @property
    def width(self) -> int:
        return self._framebuffer.width

    @property
    def height(self) -> int:
        return self._framebuffer.height

    def in_bounds(self, x: int, y: int) -> bool:
        return self._framebuffer.in_bounds(x, y)

    def get_pixel(self, x: int, y: int) -> bool:
        return self._framebuffer.get_pixel(x, y)

    def lit_pixels(self) -> List[Cell]:
        return self._framebuffer.lit_pixels()

    def rows(self) -> List[List[bool]]:
        return self._framebuffer.rows()

    def to_bytes(self) -> bytes:
        return self._framebuffer.to_bytes()

    def __str__(self) -> str:
        return str(self._framebuffer)
