"""Smoke tests for basic package imports."""


def test_imports_smoke() -> None:
    import codegen_split  # noqa: F401
    import codegen_split.cli  # noqa: F401
    import codegen_split.core  # noqa: F401
    import codegen_split.libs.splitter  # noqa: F401
    import codegen_split.observability  # noqa: F401
    import codegen_split.postprocess  # noqa: F401
