from __future__ import annotations

from fastapi import FastAPI, Form
from fastapi.responses import JSONResponse

from modules.number_systems.core.convert import (
    AllConversionsResult,
    ConversionResult,
    conversion_pairs,
    convert_number,
    convert_to_all_systems,
    invalid_all_result,
    invalid_result,
)
from modules.number_systems.core.systems import list_systems, parse_base
from numconverter.errors import ValidationNormalizeMiddleware
from numconverter.settings import load_settings

app = FastAPI(title="Number Systems Converter")
app.add_middleware(
    ValidationNormalizeMiddleware,
    body=invalid_result("Invalid input.").to_dict(),
)


def _too_long(value: str | None) -> str | None:
    limit = load_settings().max_input_length
    if value is not None and limit is not None and len(value) > limit:
        return f"Input is longer than {limit} characters."
    return None


def _respond(result: ConversionResult | AllConversionsResult) -> JSONResponse:
    status_code = 200 if result.is_valid else 400
    return JSONResponse(result.to_dict(), status_code=status_code)


@app.get("/systems")
def systems():
    return {"systems": list_systems(), "pairs": conversion_pairs()}


@app.post("/convert")
def convert(
    value: str | None = Form(None),
    from_base: str | None = Form(None),
    to_base: str | None = Form(None),
):
    source, error = parse_base(from_base, label="Source base")
    if error or source is None:
        return _respond(invalid_result(error or "Source base is required."))
    target, error = parse_base(to_base, label="Target base")
    if error or target is None:
        return _respond(invalid_result(error or "Target base is required."))

    error = _too_long(value)
    if error:
        return _respond(invalid_result(error))
    return _respond(convert_number(value, source, target))


@app.post("/convert/all")
def convert_all(
    value: str | None = Form(None),
    from_base: str | None = Form(None),
):
    source, error = parse_base(from_base, label="Source base")
    if error or source is None:
        return _respond(invalid_all_result(error or "Source base is required."))

    error = _too_long(value)
    if error:
        return _respond(invalid_all_result(error))
    return _respond(convert_to_all_systems(value, source))
