"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the widgets. It deals with scales, parameters,
dataset generators, curve interpolation and the published render state.
"""
