"""REST surface for the pension engine.

The form layer posts person/scenario payloads in camelCase and renders the
JSON it gets back. Nothing is stored here.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, replace
from typing import Any, Dict, List

import pandas as pd
from flask import Flask, jsonify, request

from .config import api_port, default_parameters_from_env, is_truthy, log_level
from .data_model import (
    FUS20Parameters,
    HistoricalSalaryTableModel,
    PersonData,
    SicknessPeriodTableModel,
    dataframe_to_salaries,
    dataframe_to_sickness_periods,
)
from .engine import (
    calculate_account_balance_projection,
    calculate_expectation_gap,
    calculate_pension,
    calculate_retirement_delay,
    calculate_sick_leave_comparison,
    current_year,
    evaluate_pension,
)
from .engine.aggregate import aggregate_projection, contributions_frame, projection_frame
from .engine.fus20 import (
    available_years,
    efficiency_burden_for_year,
    forecast_result_for_year,
    fus20_projections,
    interpolate_macroeconomic_data,
    is_year_in_forecast_range,
    parameters_for_scenario,
)
from .engine.groups import compare_pension_with_group, compare_pension_with_national_average, get_professional_group
from .engine.regions import RETIREMENT_DELAY_BY_YEAR, county_sick_leave_data, retirement_delay_statistics
from .errors import InvalidInputError
from .validation import validate_person

logger = logging.getLogger(__name__)

app = Flask(__name__)

SALARY_MODEL = HistoricalSalaryTableModel()
SICKNESS_MODEL = SicknessPeriodTableModel()


def _extract_payload_value(payload: dict, *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _optional_float(payload: dict, *keys: str) -> float | None:
    value = _extract_payload_value(payload, *keys)
    return None if value is None or value == "" else float(value)


def _optional_int(payload: dict, *keys: str) -> int | None:
    value = _extract_payload_value(payload, *keys)
    return None if value is None or value == "" else int(value)


def _flag(payload: dict, key: str, default: bool) -> bool:
    value = payload.get(key)
    return default if value is None else is_truthy(value)


def _is_nan(value: Any) -> bool:
    try:
        return not math.isfinite(value)
    except (TypeError, ValueError):
        return False


def _sanitize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [{key: (None if _is_nan(value) else value) for key, value in row.items()} for row in records]


def parse_person(payload: dict) -> PersonData:
    salaries = dataframe_to_salaries(pd.DataFrame(payload.get("historicalSalaries") or []))
    periods = dataframe_to_sickness_periods(pd.DataFrame(payload.get("sicknessPeriods") or []))
    return PersonData(
        age=int(payload["age"]),
        gender=str(payload["gender"]).strip().lower(),
        salary=float(payload["salary"]),
        work_start_year=int(_extract_payload_value(payload, "workStartYear", "work_start_year")),
        retirement_year=int(_extract_payload_value(payload, "retirementYear", "retirement_year")),
        current_savings=_optional_float(payload, "currentSavings"),
        contribution_period=_optional_int(payload, "contributionPeriod"),
        include_sick_leave=_flag(payload, "includeSickLeave", False),
        professional_group=_extract_payload_value(payload, "professionalGroup"),
        historical_salaries=tuple(salaries),
        sickness_periods=tuple(periods),
        salary_growth_rate=_optional_float(payload, "salaryGrowthRate"),
        contribution_valorization_rate=_optional_float(payload, "contributionValorizationRate"),
        inflation_rate=_optional_float(payload, "inflationRate"),
        forecast_horizon=_optional_int(payload, "forecastHorizon"),
        main_account=_optional_float(payload, "mainAccount"),
        sub_account=_optional_float(payload, "subAccount"),
        include_valorization=_flag(payload, "includeValorization", True),
        include_account_valorization=_flag(payload, "includeAccountValorization", True),
    )


PARAMETER_FIELDS = {
    "unemploymentRate": "unemployment_rate",
    "wageGrowth": "wage_growth",
    "inflation": "inflation",
    "contributionCollection": "contribution_collection",
    "generalInflation": "general_inflation",
    "pensionerInflation": "pensioner_inflation",
    "realGdpGrowth": "real_gdp_growth",
}


def parse_parameters(payload: dict | None) -> FUS20Parameters:
    """Scenario parameters for a request.

    A scenario tag other than the configured default starts from that variant's
    preset; explicit values in the payload win over both.
    """
    defaults = default_parameters_from_env()
    if not payload:
        return defaults
    scenario = str(payload.get("scenario") or defaults.scenario).strip().lower()
    overrides = {name: _optional_float(payload, key) for key, name in PARAMETER_FIELDS.items()}
    if scenario == defaults.scenario:
        overrides = {name: value for name, value in overrides.items() if value is not None}
        return replace(defaults, **overrides)
    return parameters_for_scenario(scenario, **overrides)


def _request_inputs() -> tuple[dict, PersonData, FUS20Parameters, int]:
    payload = request.get_json(silent=True) or {}
    person = parse_person(payload.get("person") or {})
    parameters = parse_parameters(payload.get("parameters"))
    as_of_year = int(payload.get("asOfYear") or current_year())
    return payload, person, parameters, as_of_year


@app.errorhandler(InvalidInputError)
def handle_invalid_input(exc: InvalidInputError):
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(KeyError)
@app.errorhandler(TypeError)
@app.errorhandler(ValueError)
def handle_bad_payload(exc: Exception):
    logger.debug("rejected payload: %r", exc)
    return jsonify({"error": f"Invalid payload: {exc}"}), 400


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.get("/api/schema")
def get_schema():
    defaults = default_parameters_from_env()
    return jsonify(
        {
            "parameterDefaults": {
                "scenario": defaults.scenario,
                "unemploymentRate": defaults.unemployment_rate,
                "wageGrowth": defaults.wage_growth,
                "inflation": defaults.inflation,
                "contributionCollection": defaults.contribution_collection,
            },
            "historicalSalaries": SALARY_MODEL.to_payload(),
            "sicknessPeriods": SICKNESS_MODEL.to_payload(),
        }
    )


@app.post("/api/validate")
def validate_endpoint():
    _, person, _, as_of_year = _request_inputs()
    result = validate_person(person, as_of_year)
    return jsonify({"isValid": result.is_valid, "errors": result.errors, "warnings": result.warnings})


@app.post("/api/pension")
def pension_endpoint():
    _, person, parameters, as_of_year = _request_inputs()
    result = calculate_pension(person, parameters, as_of_year)
    body: Dict[str, Any] = {
        "result": result.to_dict(),
        "nationalComparison": asdict(compare_pension_with_national_average(result.monthly_pension, person.gender)),
    }
    group = get_professional_group(person.professional_group)
    if group is not None:
        body["groupComparison"] = asdict(compare_pension_with_group(result.monthly_pension, group))
    return jsonify(body)


@app.post("/api/pension/delay")
def delay_endpoint():
    payload, person, parameters, as_of_year = _request_inputs()
    delay_years = int(payload.get("delayYears", 1))
    body = asdict(calculate_retirement_delay(person, delay_years, parameters, as_of_year))
    statistics = retirement_delay_statistics(_extract_payload_value(payload, "countyCode", "county_code"))
    body["delayStatistics"] = {scope: asdict(stats) for scope, stats in statistics.items()}
    body["delayHistory"] = {
        year: asdict(stats) for year, stats in RETIREMENT_DELAY_BY_YEAR.get(person.gender, {}).items()
    }
    return jsonify(body)


@app.post("/api/pension/sick-leave")
def sick_leave_endpoint():
    payload, person, parameters, as_of_year = _request_inputs()
    body = asdict(calculate_sick_leave_comparison(person, parameters, as_of_year))
    region = payload.get("county") or next(
        (period.county for period in person.sickness_periods if period.county), None
    )
    county = county_sick_leave_data(region)
    body["countySickLeave"] = asdict(county) if county is not None else None
    return jsonify(body)


@app.post("/api/pension/expectation")
def expectation_endpoint():
    payload, person, parameters, as_of_year = _request_inputs()
    expected = float(payload["expectedPension"])
    return jsonify(asdict(calculate_expectation_gap(person, expected, parameters, as_of_year)))


@app.post("/api/pension/balance")
def balance_endpoint():
    payload, person, parameters, as_of_year = _request_inputs()
    df = projection_frame(calculate_account_balance_projection(person, parameters, as_of_year))
    step = int(payload.get("step", 1))
    if step > 1:
        df = aggregate_projection(df, step=step)
    return jsonify({"step": step, "data": _sanitize_records(df.round(2).to_dict(orient="records"))})


@app.post("/api/pension/contributions")
def contributions_endpoint():
    _, person, parameters, as_of_year = _request_inputs()
    df = contributions_frame(evaluate_pension(person, parameters, as_of_year).contributions)
    return jsonify({"data": _sanitize_records(df.round(2).to_dict(orient="records"))})


@app.get("/api/fus20")
def fus20_years():
    return jsonify({"years": available_years()})


@app.get("/api/fus20/<int:year>")
def fus20_endpoint(year: int):
    scenario = request.args.get("scenario", "intermediate")
    forecast = forecast_result_for_year(year)
    burden = efficiency_burden_for_year(year)
    return jsonify(
        {
            "inForecastRange": is_year_in_forecast_range(year),
            "macroeconomic": asdict(interpolate_macroeconomic_data(year)),
            "projections": fus20_projections(scenario, year),
            "forecastResult": asdict(forecast) if forecast is not None else None,
            "efficiencyBurden": asdict(burden) if burden is not None else None,
        }
    )


if __name__ == "__main__":
    logging.basicConfig(level=log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(debug=False, port=api_port())
