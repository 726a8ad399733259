"""
Unit Tests: Models and error taxonomy

Tests model validation and serialization without external dependencies.
"""

import pytest
from pydantic import ValidationError

from core.exceptions import (
    BadRequestBodyError,
    InvalidZipcodeError,
    MethodNotAllowedError,
    ServiceError,
    UpstreamError,
    ZipcodeNotFoundError,
)
from microservices.cep_service.cep_service import CepService
from microservices.weather_service.models import (
    TemperatureReport,
    ViaCepResponse,
    WeatherApiResponse,
)

pytestmark = [pytest.mark.unit]


class TestErrorTaxonomy:

    @pytest.mark.parametrize("error_cls,status,message", [
        (InvalidZipcodeError, 422, "invalid zipcode"),
        (ZipcodeNotFoundError, 404, "can not find zipcode"),
        (UpstreamError, 500, "upstream service error"),
        (MethodNotAllowedError, 405, "Method Not Allowed"),
        (BadRequestBodyError, 400, "error decoding request body"),
    ])
    def test_status_and_default_message(self, error_cls, status, message):
        error = error_cls()
        assert isinstance(error, ServiceError)
        assert error.status_code == status
        assert error.message == message
        assert str(error) == message

    def test_upstream_error_keeps_diagnostics(self):
        error = UpstreamError("weather API returned status 403", upstream="weatherapi", upstream_status=403)
        assert error.message == "weather API returned status 403"
        assert error.upstream == "weatherapi"
        assert error.upstream_status == 403


class TestTemperatureReport:

    def test_serializes_with_contract_field_names(self):
        report = TemperatureReport(city="São Paulo", temp_C=21.0, temp_F=69.8, temp_K=294.0)
        assert list(report.model_dump().keys()) == ["city", "temp_C", "temp_F", "temp_K"]

    def test_json_keeps_unicode_city(self):
        report = TemperatureReport(city="Florianópolis", temp_C=10.0, temp_F=50.0, temp_K=283.0)
        assert report.model_dump()["city"] == "Florianópolis"


class TestViaCepResponse:

    def test_found_payload(self, factory):
        payload = factory.make_viacep_payload(city="Curitiba")
        parsed = ViaCepResponse.model_validate(payload)
        assert parsed.localidade == "Curitiba"
        assert parsed.erro is False

    @pytest.mark.parametrize("as_string", [False, True])
    def test_not_found_flag_as_bool_or_string(self, factory, as_string):
        parsed = ViaCepResponse.model_validate(factory.make_viacep_not_found_payload(as_string=as_string))
        assert parsed.erro is True
        assert parsed.localidade == ""

    def test_invalid_json_raises(self):
        with pytest.raises(ValidationError):
            ViaCepResponse.model_validate_json(b"<html>Bad Request</html>")


class TestWeatherApiResponse:

    def test_reads_current_temp_c(self, factory):
        parsed = WeatherApiResponse.model_validate(factory.make_weatherapi_payload(temp_c=21.0))
        assert parsed.current.temp_c == 21.0

    def test_missing_current_raises(self):
        with pytest.raises(ValidationError):
            WeatherApiResponse.model_validate({"error": {"code": 1006, "message": "No matching location found."}})


class TestCepInputParsing:
    """CepService.parse_input - 400 vs 422 boundary"""

    def test_valid_body(self):
        assert CepService.parse_input(b'{"cep": "01001000"}').cep == "01001000"

    def test_unknown_fields_ignored(self):
        assert CepService.parse_input(b'{"cep": "01001000", "extra": 1}').cep == "01001000"

    def test_missing_cep_is_empty_string(self):
        """Missing cep decodes fine and is rejected later as invalid zipcode"""
        assert CepService.parse_input(b"{}").cep == ""

    def test_invalid_cep_value_still_decodes(self):
        assert CepService.parse_input(b'{"cep": "123"}').cep == "123"

    @pytest.mark.parametrize("body", [
        b"",
        b"not json",
        b'{"cep": ',
        b"[]",
        b'"01001000"',
        b'{"cep": 1001000}',
        b'{"cep": null}',
    ])
    def test_malformed_bodies(self, body):
        with pytest.raises(BadRequestBodyError):
            CepService.parse_input(body)
