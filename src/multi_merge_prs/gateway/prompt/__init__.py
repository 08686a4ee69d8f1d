"""Interactive prompt gateway.

Import from submodules:
- abc: Prompter
- real: ClickPrompter
- fake: FakePrompter
"""
