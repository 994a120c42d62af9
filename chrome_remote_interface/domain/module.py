"""Generated artifacts - what the emitter produces for each domain."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GeneratedCallable(BaseModel):
    """One command function, callable with one, two or three arguments."""

    command_name: str = Field(..., description="Command name, schema casing")
    function_name: str = Field(..., description="Python function name")
    arities: tuple[int, ...] = (1, 2, 3)
    doc_text: str = ""
    dispatch_method_string: str = Field(..., description="Wire method, Domain.command")
    source: str = ""

    model_config = {"frozen": True}


class GeneratedModule(BaseModel):
    """The Python module emitted for one domain."""

    domain_name: str
    module_name: str
    type_declarations: list[str] = Field(default_factory=list)
    callables: list[GeneratedCallable] = Field(default_factory=list)
    referenced_domains: list[str] = Field(default_factory=list)
    source: str = ""

    model_config = {"frozen": True}

    @property
    def filename(self) -> str:
        """File name of the module inside the output package."""
        return f"{self.module_name}.py"

    def get_callable(self, command_name: str) -> GeneratedCallable | None:
        """Look up a generated callable by its schema command name."""
        return next(
            (c for c in self.callables if c.command_name == command_name), None
        )
