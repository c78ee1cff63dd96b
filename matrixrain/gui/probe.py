from typing import Callable, Optional, Tuple

Size = Tuple[float, float]  # (w, h)

class SizeProbe:
    """Avisa `on_change` sempre que o tamanho medido muda."""

    def __init__(self, on_change: Callable[[Size], None]):
        self.on_change = on_change
        self.last: Optional[Size] = None

    def report(self, size: Size) -> bool:
        if size == self.last:
            return False
        self.last = size
        self.on_change(size)
        return True
