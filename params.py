class Params:
    """
    All tunable knobs live here so you don't hunt through code.
    """
    def __init__(self):
        # Terminal nodes (wire grabber), as fractions of the viewport
        self.terminal_count = 3
        self.terminal_x0 = 0.2
        self.terminal_dx = 0.3
        self.terminal_bottom_y = 0.9
        self.terminal_top_y = 0.1
        self.terminal_radius = 15.0     # 30 px circles

        # Wire look
        self.wire_sag = 50.0            # base droop added to half the x-span
        self.wire_steps = 32
        self.wire_thickness = 3

        # Circle field layout
        self.node_count = 30
        self.min_separation = 50.0
        self.field_margin = 0.1         # sample inside [margin, 1 - margin]
        self.max_layout_attempts = 20000
        self.seed = None                # int for reproducible layouts

        # Focal region: nodes inside grow and become tappable
        self.focal_radius = 100.0
        self.large_size = 60.0
        self.small_size = 30.0
        self.letter_scale = 0.4         # letter height relative to circle size

        # Pointer: travel (px) before a press turns into a drag
        self.min_drag_distance = 10.0
