"""Main window for the pathfinder visualizer."""

from PySide6.QtWidgets import (
    QMainWindow, QVBoxLayout, QHBoxLayout, QWidget, QPushButton,
    QLabel, QSlider, QComboBox, QSpinBox, QButtonGroup, QRadioButton,
    QStatusBar, QGroupBox, QLineEdit
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut

from ..app.controller import PathfinderController
from ..app.fsm import AlgoState
from .grid_view import GridView

ALGORITHMS = [("Breadth-First Search", "bfs"), ("Depth-First Search", "dfs"), ("A*", "astar")]


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: PathfinderController):
        super().__init__()
        self.controller = controller

        self.setWindowTitle("Pathfinder Visualizer")
        self.setMinimumSize(1000, 700)

        self._create_ui()
        self._setup_connections()
        self._setup_shortcuts()

        self._update_button_states()
        self._update_statistics_display()

    def _create_ui(self):
        """Create the user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout(central_widget)
        main_layout.addLayout(self._create_controls())

        content_layout = QHBoxLayout()
        self.grid_view = GridView(self.controller)
        content_layout.addWidget(self.grid_view, 3)
        content_layout.addWidget(self._create_statistics_panel(), 1)
        main_layout.addLayout(content_layout, 1)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready - Click to edit cells | Enter to run, Space to pause, S to skip, R to reset, Q to quit")

    def _create_controls(self) -> QHBoxLayout:
        """Create the control panel."""
        layout = QHBoxLayout()

        # Search controls
        algo_group = QGroupBox("Search")
        algo_layout = QHBoxLayout(algo_group)

        self.algorithm_combo = QComboBox()
        for label, name in ALGORITHMS:
            self.algorithm_combo.addItem(label, name)
        algo_layout.addWidget(self.algorithm_combo)

        self.run_btn = QPushButton("Run")
        self.pause_btn = QPushButton("Pause")
        self.skip_btn = QPushButton("Skip")
        self.reset_btn = QPushButton("Reset")
        for btn in [self.run_btn, self.pause_btn, self.skip_btn, self.reset_btn]:
            algo_layout.addWidget(btn)

        # Speed control
        speed_layout = QVBoxLayout()
        speed_layout.addWidget(QLabel("Delay (ms)"))
        self.speed_slider = QSlider(Qt.Horizontal)
        self.speed_slider.setRange(1, 500)
        self.speed_slider.setValue(self.controller.speed)
        speed_layout.addWidget(self.speed_slider)

        # Maze controls
        maze_group = QGroupBox("Maze")
        maze_layout = QHBoxLayout(maze_group)

        maze_layout.addWidget(QLabel("Cells:"))
        self.width_spin = QSpinBox()
        self.width_spin.setRange(2, 100)
        self.width_spin.setValue(12)
        maze_layout.addWidget(self.width_spin)

        maze_layout.addWidget(QLabel("×"))
        self.height_spin = QSpinBox()
        self.height_spin.setRange(2, 100)
        self.height_spin.setValue(12)
        maze_layout.addWidget(self.height_spin)

        maze_layout.addWidget(QLabel("Seed:"))
        self.seed_edit = QLineEdit()
        self.seed_edit.setPlaceholderText("random")
        self.seed_edit.setMaximumWidth(90)
        maze_layout.addWidget(self.seed_edit)

        self.maze_btn = QPushButton("Generate")
        self.empty_btn = QPushButton("Empty Grid")
        maze_layout.addWidget(self.maze_btn)
        maze_layout.addWidget(self.empty_btn)

        # Edit mode
        edit_group = QGroupBox("Edit Mode")
        edit_layout = QVBoxLayout(edit_group)

        self.edit_button_group = QButtonGroup()
        self.wall_radio = QRadioButton("Toggle Walls")
        self.start_radio = QRadioButton("Set Start")
        self.goal_radio = QRadioButton("Set Goal")
        self.wall_radio.setChecked(True)
        for radio in [self.wall_radio, self.start_radio, self.goal_radio]:
            self.edit_button_group.addButton(radio)
            edit_layout.addWidget(radio)

        layout.addWidget(algo_group)
        layout.addLayout(speed_layout)
        layout.addWidget(maze_group)
        layout.addWidget(edit_group)
        layout.addStretch()

        return layout

    def _create_statistics_panel(self) -> QGroupBox:
        """Create the statistics display panel."""
        stats_group = QGroupBox("Statistics")
        stats_layout = QVBoxLayout(stats_group)

        self.state_label = QLabel()
        self.visited_label = QLabel()
        self.expanded_label = QLabel()
        self.path_length_label = QLabel()
        self.elapsed_label = QLabel()

        for label in [self.state_label, self.visited_label, self.expanded_label,
                      self.path_length_label, self.elapsed_label]:
            stats_layout.addWidget(label)
        stats_layout.addStretch()

        return stats_group

    def _setup_connections(self):
        """Setup signal connections."""
        self.run_btn.clicked.connect(self._on_run_clicked)
        self.pause_btn.clicked.connect(self._on_pause_clicked)
        self.skip_btn.clicked.connect(self.controller.skip)
        self.reset_btn.clicked.connect(self.controller.reset_playback)
        self.speed_slider.valueChanged.connect(self._on_speed_changed)
        self.maze_btn.clicked.connect(self._on_generate_clicked)
        self.empty_btn.clicked.connect(self._on_empty_clicked)
        self.algorithm_combo.currentIndexChanged.connect(self._on_algorithm_changed)

        self.wall_radio.toggled.connect(lambda checked: checked and self.grid_view.set_edit_mode("wall"))
        self.start_radio.toggled.connect(lambda checked: checked and self.grid_view.set_edit_mode("start"))
        self.goal_radio.toggled.connect(lambda checked: checked and self.grid_view.set_edit_mode("goal"))

        self.controller.state_changed.connect(self._on_state_changed)
        self.controller.grid_updated.connect(self._update_statistics_display)
        self.controller.error_occurred.connect(self._on_error)

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        QShortcut(QKeySequence("Return"), self, self._on_run_clicked)
        QShortcut(QKeySequence("Space"), self, self._on_pause_clicked)
        QShortcut(QKeySequence("S"), self, self.controller.skip)
        QShortcut(QKeySequence("R"), self, self.controller.reset_playback)
        QShortcut(QKeySequence("Q"), self, self.close)

    # Event handlers

    def _on_run_clicked(self):
        self.controller.algorithm = self.algorithm_combo.currentData()
        self.controller.run_search()

    def _on_pause_clicked(self):
        if self.controller.current_state == AlgoState.RUNNING:
            self.controller.pause()
        elif self.controller.current_state == AlgoState.PAUSED:
            self.controller.resume()

    def _on_speed_changed(self, value: int):
        self.controller.speed = value

    def _on_algorithm_changed(self, index: int):
        self.controller.algorithm = self.algorithm_combo.itemData(index)

    def _on_generate_clicked(self):
        text = self.seed_edit.text().strip()
        seed = None
        if text:
            try:
                seed = int(text)
            except ValueError:
                self._on_error(f"Seed must be an integer, got '{text}'")
                return
        self.controller.generate_maze(self.width_spin.value(), self.height_spin.value(), seed)

    def _on_empty_clicked(self):
        self.controller.create_new_grid(self.width_spin.value() * 2 + 1,
                                        self.height_spin.value() * 2 + 1)

    def _on_state_changed(self, state: AlgoState):
        self._update_button_states()
        self._update_statistics_display()
        self.status_bar.showMessage(self.controller.state_description)

    def _on_error(self, message: str):
        self.status_bar.showMessage(f"Error: {message}", 5000)

    # UI updates

    def _update_button_states(self):
        """Enable or disable buttons for the current state."""
        state = self.controller.current_state
        playing = state in (AlgoState.RUNNING, AlgoState.PAUSED)

        self.run_btn.setEnabled(not playing)
        self.pause_btn.setEnabled(playing)
        self.pause_btn.setText("Resume" if state == AlgoState.PAUSED else "Pause")
        self.skip_btn.setEnabled(playing)
        self.maze_btn.setEnabled(not playing)
        self.empty_btn.setEnabled(not playing)
        self.algorithm_combo.setEnabled(not playing)

    def _update_statistics_display(self):
        """Refresh the statistics labels."""
        playback = self.controller.playback
        result = playback.result

        self.state_label.setText(f"State: {self.controller.state_description}")
        self.visited_label.setText(f"Visited: {playback.visited_count} / {playback.total}")
        self.expanded_label.setText(f"Expanded Nodes: {result.expanded_nodes}")
        self.path_length_label.setText(
            f"Path Length: {result.path_length}" if result.found else "Path Length: -"
        )
        self.elapsed_label.setText(f"Elapsed: {self.controller.elapsed_ms:.3f} ms")
