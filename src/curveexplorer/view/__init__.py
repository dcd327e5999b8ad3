"""
The VIEW layer: the Qt main window, the control panels and the chart widget.
Widgets write through the StateStore and never call the renderer directly.
"""
