# retro_chip8/core/errors.py
"""
エミュレーションコアが送出する例外の定義。

組み込み例外（ValueError, IndexError）を併せて継承し、
組み込み例外を捕捉する呼び出し元とも互換性を保ちます。
"""

# @intent:responsibility エミュレーションコア由来の全ての例外の基底クラス。
class EmulationError(Exception):
    pass

# @intent:responsibility プログラム領域に収まらないROMのロードを通知します。
class RomTooLargeError(EmulationError, ValueError):
    def __init__(self, size: int, capacity: int):
        super().__init__(f"ROM of {size} bytes exceeds program space of {capacity} bytes.")
        self.size = size
        self.capacity = capacity

# @intent:responsibility PCがメモリ範囲外を指した状態でのフェッチを通知します。セッションは致命的状態となり、リセットが必要です。
class ProgramCounterError(EmulationError, IndexError):
    def __init__(self, pc: int, limit: int):
        super().__init__(f"Program counter {pc:#06x} is outside addressable memory (limit {limit:#06x}).")
        self.pc = pc
        self.limit = limit
