"""CHECKEDOPS test suite.

Folder taxonomy
- unit/ : Isolated, fast checks of a single module/class/function.
- e2e/  : The ``checkedops`` CLI driven through Click's CliRunner.

General guidance
- Keep unit tests fast and deterministic (no real I/O).
- Assert on exact error messages; they are part of the public contract.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
