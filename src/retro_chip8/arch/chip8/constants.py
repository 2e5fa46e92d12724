# src/retro_chip8/arch/chip8/constants.py
"""
CHIP-8のメモリマップ、画面サイズ、組み込みフォントなどの定数定義。
"""

# メモリマップ
MEMORY_SIZE = 0x1000         # 4KB
FONT_ADDRESS = 0x050         # フォント領域 0x050-0x09F
PROGRAM_START = 0x200        # プログラムロード領域の先頭
MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_START

# レジスタ
REGISTER_COUNT = 16
FLAG_REGISTER = 0xF          # VF: キャリー/ボロー/衝突フラグ

# 当時の実機が許していたコールスタックの深さ。超過してもエラーにはしない
STACK_DEPTH_LIMIT = 16

# 画面
DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32

# 入力
KEY_COUNT = 16

# タイマー (ホスト側が駆動する周期)
TIMER_FREQUENCY_HZ = 60

# @intent:constant 16文字 (0-F) × 5バイトの16進フォント。構築時にFONT_ADDRESSへ複製される不変データ。
FONT_GLYPH_SIZE = 5
FONT_SET = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])
