"""Qt adapters for scroll anchors, the scrollable page and the scroll lock."""

from __future__ import annotations

from PySide6.QtCore import QEasingCurve, QEvent, QObject, QPropertyAnimation, Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QGraphicsDropShadowEffect, QScrollArea, QWidget

from app.views.constants import HIGHLIGHT_BLUR_RADIUS, HIGHLIGHT_COLOR


class ScrollAreaViewport(QObject):
    """Smooth vertical scrolling and page scroll lock for a `QScrollArea`."""

    def __init__(self, area: QScrollArea, duration_ms: int = 600) -> None:
        super().__init__(area)
        self._area = area
        self._duration = duration_ms
        self._locked = False
        self._animation = QPropertyAnimation(area.verticalScrollBar(), b"value", self)
        self._animation.setEasingCurve(QEasingCurve.InOutCubic)
        area.viewport().installEventFilter(self)

    @property
    def area(self) -> QScrollArea:
        return self._area

    def smooth_scroll_to(self, offset: int) -> None:
        """Animate the vertical scroll bar to `offset` (clamped to its range)."""
        bar = self._area.verticalScrollBar()
        target = max(bar.minimum(), min(int(offset), bar.maximum()))
        self._animation.stop()
        if self._duration <= 0:
            bar.setValue(target)
            return
        self._animation.setDuration(self._duration)
        self._animation.setStartValue(bar.value())
        self._animation.setEndValue(target)
        self._animation.start()

    def set_scroll_locked(self, locked: bool) -> None:
        """Suspend wheel/keyboard scrolling of the page while an overlay is open."""
        self._locked = locked
        self._area.verticalScrollBar().setEnabled(not locked)

    def eventFilter(self, obj, event) -> bool:  # noqa: N802 - Qt override
        if self._locked and event.type() in (QEvent.Wheel, QEvent.KeyPress):
            return True
        return super().eventFilter(obj, event)


class WidgetAnchor:
    """Scroll anchor backed by a widget placed inside a `QScrollArea`."""

    def __init__(self, widget: QWidget, viewport: ScrollAreaViewport) -> None:
        self._widget = widget
        self._viewport = viewport
        self._area = viewport.area
        self._effect: QGraphicsDropShadowEffect | None = None

    def top(self) -> int:
        """Y position of the widget within the scrolled content."""
        content = self._area.widget()
        if content is None:
            return self._widget.y()
        return self._widget.mapTo(content, self._widget.rect().topLeft()).y()

    def scroll_into_view(self) -> None:
        # Centre the widget vertically in the visible area
        visible_h = self._area.viewport().height()
        offset = self.top() - max(0, (visible_h - self._widget.height()) // 2)
        self._viewport.smooth_scroll_to(offset)

    def set_emphasis(self, on: bool) -> None:
        """Glow around the widget while emphasised."""
        try:
            if on:
                effect = QGraphicsDropShadowEffect(self._widget)
                effect.setBlurRadius(HIGHLIGHT_BLUR_RADIUS)
                effect.setOffset(0, 0)
                effect.setColor(QColor(HIGHLIGHT_COLOR))
                self._widget.setGraphicsEffect(effect)
                self._effect = effect
                self._widget.setProperty("emphasised", True)
            else:
                self._widget.setGraphicsEffect(None)
                self._effect = None
                self._widget.setProperty("emphasised", False)
            self._widget.style().unpolish(self._widget)
            self._widget.style().polish(self._widget)
        except RuntimeError:  # widget deleted while the highlight timer was pending
            self._effect = None


def set_pointer_cursor(widget: QWidget) -> None:
    widget.setCursor(Qt.PointingHandCursor)
