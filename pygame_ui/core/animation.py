"""Tweening with easing functions for card and overlay motion."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional

from pygame_ui.utils.math_utils import lerp


class EaseType(Enum):
    """Available easing function types."""

    LINEAR = auto()
    EASE_OUT = auto()
    EASE_OUT_BACK = auto()


def ease_linear(t: float) -> float:
    """Linear interpolation (no easing)."""
    return t


def ease_out_quad(t: float) -> float:
    """Quadratic ease out - decelerates to zero."""
    return 1 - (1 - t) * (1 - t)


def ease_out_back(t: float, overshoot: float = 1.70158) -> float:
    """Ease out with a slight overshoot; used for cards landing on the felt."""
    c3 = overshoot + 1
    return 1 + c3 * pow(t - 1, 3) + overshoot * pow(t - 1, 2)


EASE_FUNCTIONS: Dict[EaseType, Callable[[float], float]] = {
    EaseType.LINEAR: ease_linear,
    EaseType.EASE_OUT: ease_out_quad,
    EaseType.EASE_OUT_BACK: ease_out_back,
}


@dataclass
class Tween:
    """Animates one numeric attribute of an object."""

    target: Any
    property_name: str
    start_value: float
    end_value: float
    duration: float
    ease_type: EaseType = EaseType.EASE_OUT
    delay: float = 0.0
    on_complete: Optional[Callable[[], None]] = None

    elapsed: float = field(default=0.0, init=False)
    completed: bool = field(default=False, init=False)

    @property
    def remaining_delay(self) -> float:
        """Seconds until the value starts changing."""
        return max(0.0, self.delay - self.elapsed)

    def update(self, dt: float) -> bool:
        """Advance the tween.

        Returns:
            True if still animating, False if completed
        """
        if self.completed:
            return False

        self.elapsed += dt
        if self.elapsed < self.delay:
            return True

        active_time = self.elapsed - self.delay
        progress = min(1.0, active_time / self.duration) if self.duration > 0 else 1.0
        eased = EASE_FUNCTIONS[self.ease_type](progress)
        setattr(self.target, self.property_name, lerp(self.start_value, self.end_value, eased))

        if progress >= 1.0:
            self.completed = True
            if self.on_complete:
                self.on_complete()
            return False
        return True


class TweenManager:
    """Manages multiple concurrent tweens."""

    def __init__(self):
        self.tweens: List[Tween] = []

    def create(
        self,
        target: Any,
        property_name: str,
        end_value: float,
        duration: float,
        ease_type: EaseType = EaseType.EASE_OUT,
        delay: float = 0.0,
        on_complete: Optional[Callable[[], None]] = None,
    ) -> Tween:
        """Create a tween starting from the attribute's current value."""
        tween = Tween(
            target=target,
            property_name=property_name,
            start_value=getattr(target, property_name),
            end_value=end_value,
            duration=duration,
            ease_type=ease_type,
            delay=delay,
            on_complete=on_complete,
        )
        self.tweens.append(tween)
        return tween

    def update(self, dt: float) -> None:
        """Update all tweens, dropping finished ones."""
        self.tweens = [tween for tween in self.tweens if tween.update(dt)]

    def clear(self) -> None:
        """Remove all tweens."""
        self.tweens.clear()

    @property
    def is_animating(self) -> bool:
        """Check if any tweens are active."""
        return len(self.tweens) > 0

    @property
    def pending_delay(self) -> float:
        """Longest wait before a queued tween begins (0 when all are running)."""
        return max([0.0] + [tween.remaining_delay for tween in self.tweens])
