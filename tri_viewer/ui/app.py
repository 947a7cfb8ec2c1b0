from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from PyQt5 import QtWidgets

from tri_viewer.config import ViewerConfig, load_viewer_config, load_viewer_config_file
from tri_viewer.errors import DegenerateTriangleError
from tri_viewer.geometry.primitives import CartesianPoint
from tri_viewer.rendering.triangle_painter import GridStyle, TriangleStyle
from tri_viewer.ui.canvas_widget import TriangleCanvas

logger = logging.getLogger(__name__)


class TriangleViewerApp(QtWidgets.QApplication):
    """Application object that resolves and holds the viewer configuration.

    An explicit ``config`` wins, then ``config_file``, then the INI found by
    :func:`config_path` next to ``main_script_path``.
    """

    def __init__(
        self,
        argv: List[str],
        main_script_path: Optional[Path] = None,
        config: Optional[ViewerConfig] = None,
        config_file: Optional[Path] = None,
    ) -> None:
        super().__init__(argv)
        self.setQuitOnLastWindowClosed(True)
        if config is None:
            if config_file is not None:
                config = load_viewer_config_file(config_file)
            else:
                config = load_viewer_config(main_script_path)
        self.config = config
        self.window: TriangleViewerWindow | None = None

    def open_window(self) -> "TriangleViewerWindow":
        self.window = TriangleViewerWindow(self.config)
        self.window.show()
        return self.window


class TriangleViewerWindow(QtWidgets.QMainWindow):
    """Main window with one draggable triangle and its barycentric grid."""

    def __init__(self, config: ViewerConfig) -> None:
        super().__init__()
        self.setWindowTitle("Triangle Viewer")
        self._config = config

        self.canvas = TriangleCanvas(
            config.width,
            config.height,
            config.scale,
            config.offset,
            background=config.background,
        )
        grid = GridStyle(config.grid_spacing, config.grid_color) if config.grid_enabled else None
        a, b, c = config.triangle
        self.shape = self.canvas.new_triangle(
            a,
            b,
            c,
            draggable=True,
            style=TriangleStyle(fill=None, stroke="black", vertex_color="red"),
            grid=grid,
            pick_radius=config.pick_radius,
        )
        self.shape_count_label = QtWidgets.QLabel()
        self.statusBar().addPermanentWidget(self.shape_count_label)
        self.canvas.shapesChanged.connect(self._on_shapes_changed)
        self.canvas.cursorMoved.connect(self._on_cursor_moved)
        self.canvas.add_shape(self.shape)

        self.setCentralWidget(self.canvas)
        self.statusBar().showMessage("Drag a vertex to reshape the triangle")
        logger.info(
            "Viewer window ready: %sx%s scale=%s offset=%s",
            config.width,
            config.height,
            config.scale,
            config.offset,
        )

    def _on_shapes_changed(self) -> None:
        count = len(self.canvas.manager)
        self.shape_count_label.setText(f"{count} shape" if count == 1 else f"{count} shapes")

    def _on_cursor_moved(self, point: CartesianPoint | None) -> None:
        if point is None:
            self.statusBar().clearMessage()
            return
        self.statusBar().showMessage(self.describe_point(point))

    def describe_point(self, point: CartesianPoint) -> str:
        text = f"x={point.x:.3f}  y={point.y:.3f}"
        try:
            i, j = self.shape.triangle.to_barycentric(point)
        except DegenerateTriangleError:
            return f"{text}  (degenerate triangle)"
        return f"{text}  i={i:.3f}  j={j:.3f}  k={1.0 - i - j:.3f}"
