"""Global constants for KiCad board import."""

ROOT_NODE_NAME = "kicad_pcb"
"""Head symbol every .kicad_pcb file must start with."""

LEGACY_FOOTPRINT_NODE = "module"
"""Footprint node name used by KiCad 5 and earlier."""

BOARD_EXTENSION = ".kicad_pcb"
"""File extension accepted by the document loader."""

DEFAULT_STROKE_TYPE = "default"
"""Stroke line style when a (stroke ...) node has no (type ...) child."""

DEFAULT_VIA_LAYERS = ("F.Cu", "B.Cu")
"""Layer span assumed for a via without a (layers ...) child."""

DEFAULT_FOOTPRINT_LAYER = "F.Cu"
"""Placement side assumed for a footprint without a (layer ...) child."""

DEFAULT_FONT_SIZE = 1.0
"""Font width/height (mm) when (font ...) has no (size ...) child."""

DEFAULT_NET_CLASS = "Default"
"""Net class name when a (net_class ...) node has no name."""

DEFAULT_BOARD_THICKNESS = 1.6
"""Board thickness (mm) reported when (general (thickness ...)) is absent."""

MAX_RESPONSE_CHARS = 50_000
"""Maximum characters in a server response before truncation (~12k tokens)."""
