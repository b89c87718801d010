import pytest

from zus_pension.app import app


@pytest.fixture
def client(monkeypatch):
    for name in ("FUS20_SCENARIO", "FUS20_WAGE_GROWTH", "FUS20_USE_MACRO_TABLE", "FUS20_CONTRIBUTION_COLLECTION"):
        monkeypatch.delenv(name, raising=False)
    app.config["TESTING"] = True
    return app.test_client()


PERSON = {
    "age": 30,
    "gender": "male",
    "salary": 5000,
    "workStartYear": 2020,
    "retirementYear": 2061,
    "professionalGroup": "employees",
    "historicalSalaries": [{"year": 2020, "amount": 60000}],
}


def test_health(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_pension_endpoint_returns_result_and_group_comparison(client):
    response = client.post("/api/pension", json={"person": PERSON, "asOfYear": 2026})

    body = response.get_json()
    assert response.status_code == 200
    assert body["result"]["monthlyPension"] > 0
    assert body["result"]["yearsToRetirement"] == 35
    assert body["groupComparison"]["group_id"] == "employees"
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_past_retirement_is_a_bad_request(client):
    person = dict(PERSON, workStartYear=2000, retirementYear=2020)

    response = client.post("/api/pension", json={"person": person, "asOfYear": 2026})

    assert response.status_code == 400
    assert "before" in response.get_json()["error"]


def test_missing_field_is_a_bad_request(client):
    person = {key: value for key, value in PERSON.items() if key != "age"}

    response = client.post("/api/pension", json={"person": person, "asOfYear": 2026})

    assert response.status_code == 400


def test_bad_collection_rate_is_a_bad_request(client):
    response = client.post(
        "/api/pension",
        json={"person": PERSON, "parameters": {"contributionCollection": 140}, "asOfYear": 2026},
    )

    assert response.status_code == 400


def test_delay_endpoint(client):
    response = client.post("/api/pension/delay", json={"person": PERSON, "delayYears": 2, "asOfYear": 2026})

    assert response.get_json()["increase_percentage"] > 0


def test_sick_leave_and_expectation_endpoints(client):
    sick = client.post("/api/pension/sick-leave", json={"person": PERSON, "asOfYear": 2026}).get_json()
    gap = client.post(
        "/api/pension/expectation",
        json={"person": PERSON, "expectedPension": 100000, "asOfYear": 2026},
    ).get_json()

    assert sick["difference"] > 0
    assert gap["additional_years_needed"] > 0
    assert gap["is_expectation_met"] is False


def test_balance_endpoint_aggregates(client):
    response = client.post("/api/pension/balance", json={"person": PERSON, "step": 10, "asOfYear": 2026})

    data = response.get_json()["data"]
    assert [row["Period"] for row in data] == ["2026-2035", "2036-2045", "2046-2055", "2056-2061"]


def test_validate_endpoint(client):
    person = dict(PERSON, age=17)

    body = client.post("/api/validate", json={"person": person, "asOfYear": 2026}).get_json()

    assert body["isValid"] is False
    assert body["errors"]


def test_schema_and_fus20_endpoints(client):
    schema = client.get("/api/schema").get_json()
    fus20 = client.get("/api/fus20/2030?scenario=optimistic").get_json()

    assert schema["parameterDefaults"]["scenario"] == "intermediate"
    assert schema["historicalSalaries"]["columns"][0]["field"] == "Year"
    assert fus20["inForecastRange"] is True
    assert fus20["projections"]["pensioners"] == pytest.approx(9.8)


@pytest.mark.parametrize("flag,reported", [("false", False), ("0", False), ("no", False), ("true", True), (True, True)])
def test_string_flags_are_parsed(client, flag, reported):
    person = dict(PERSON, includeSickLeave=flag)

    result = client.post("/api/pension", json={"person": person, "asOfYear": 2026}).get_json()["result"]

    assert (result["sickLeaveImpact"] > 0) is reported


def test_string_valorization_flag_is_parsed(client):
    on = client.post("/api/pension/balance", json={"person": PERSON, "asOfYear": 2026}).get_json()["data"]
    person = dict(PERSON, includeAccountValorization="false")
    off = client.post("/api/pension/balance", json={"person": person, "asOfYear": 2026}).get_json()["data"]

    assert off[-1]["TotalBalance"] < on[-1]["TotalBalance"]


def test_scenario_tag_selects_preset(client):
    base = client.post("/api/pension", json={"person": PERSON, "asOfYear": 2026}).get_json()["result"]
    pessimistic = client.post(
        "/api/pension",
        json={"person": PERSON, "parameters": {"scenario": "pessimistic"}, "asOfYear": 2026},
    ).get_json()["result"]

    assert pessimistic["projectedInflation"] == 3.2
    assert pessimistic["monthlyPension"] < base["monthlyPension"]


def test_explicit_parameters_beat_the_preset(client):
    result = client.post(
        "/api/pension",
        json={"person": PERSON, "parameters": {"scenario": "optimistic", "inflation": 2.9}, "asOfYear": 2026},
    ).get_json()["result"]

    assert result["projectedInflation"] == 2.9


def test_unknown_scenario_is_a_bad_request(client):
    response = client.post(
        "/api/pension", json={"person": PERSON, "parameters": {"scenario": "apocalyptic"}, "asOfYear": 2026}
    )

    assert response.status_code == 400


def test_pension_endpoint_compares_with_national_average(client):
    body = client.post("/api/pension", json={"person": PERSON, "asOfYear": 2026}).get_json()

    assert body["nationalComparison"]["reference"] == "male"
    assert body["nationalComparison"]["national_average"] == 3567.89


def test_delay_endpoint_includes_delay_statistics(client):
    body = client.post(
        "/api/pension/delay", json={"person": PERSON, "delayYears": 1, "countyCode": "1465", "asOfYear": 2026}
    ).get_json()

    assert body["delayStatistics"]["national"]["exact_age"] == 77.4
    assert body["delayStatistics"]["county"]["exact_age"] == 77.7
    assert body["delayHistory"]["2024"]["delay_1_to_11_months"] == 17.1


def test_sick_leave_endpoint_uses_county_of_recorded_periods(client):
    person = dict(PERSON, sicknessPeriods=[{"year": 2024, "days": 10, "type": "past", "county": "Pomorskie"}])

    body = client.post("/api/pension/sick-leave", json={"person": person, "asOfYear": 2026}).get_json()

    assert body["countySickLeave"]["region"] == "pomorskie"
    assert body["difference"] > 0


def test_sick_leave_endpoint_without_county(client):
    body = client.post("/api/pension/sick-leave", json={"person": PERSON, "asOfYear": 2026}).get_json()

    assert body["countySickLeave"] is None


def test_contributions_endpoint_lists_every_working_year(client):
    data = client.post("/api/pension/contributions", json={"person": PERSON, "asOfYear": 2026}).get_json()["data"]

    assert [row["year"] for row in data] == list(range(2020, 2061))
    assert data[0]["valorization_rate"] == 3.56
    assert data[-1]["valorization_rate"] is None
    assert data[-1]["Cumulative"] > data[0]["Cumulative"]


def test_fus20_reference_rows(client):
    years = client.get("/api/fus20").get_json()["years"]
    body = client.get("/api/fus20/2030").get_json()
    gap_year = client.get("/api/fus20/2031").get_json()

    assert 2052 in years and years == sorted(years)
    assert body["forecastResult"]["annual_balance"] == -93104
    assert body["efficiencyBurden"] is None
    assert gap_year["forecastResult"] is None
