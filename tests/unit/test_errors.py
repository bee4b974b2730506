"""Tests for jp_common.errors and jp_common.response."""

from src.jp_common.errors import (
    AppError,
    BlankFieldError,
    ContributionNotFoundError,
    InternalError,
    InvalidRequestError,
    NothingToUpdateError,
    PayoutNotFoundError,
    RuleNotFoundError,
    StorageError,
    VenueNotFoundError,
)
from src.jp_common.response import ApiResponse, error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_custom_http_status(self) -> None:
        err = AppError(code=1001, message="bad", http_status=422)
        assert err.http_status == 422

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1001, message="test"), Exception)


class TestSpecificErrors:
    def test_invalid_request(self) -> None:
        err = InvalidRequestError("body.manager: Field required")
        assert (err.code, err.http_status) == (1001, 422)
        assert "manager" in err.message

    def test_nothing_to_update_lists_fields(self) -> None:
        err = NothingToUpdateError(("variant", "gross_amount"))
        assert (err.code, err.http_status) == (1002, 422)
        assert "variant, gross_amount" in err.message

    def test_blank_field(self) -> None:
        err = BlankFieldError("table_label")
        assert (err.code, err.http_status) == (1003, 422)
        assert "table_label" in err.message

    def test_venue_not_found(self) -> None:
        err = VenueNotFoundError(42)
        assert (err.code, err.http_status) == (2001, 404)
        assert "42" in err.message

    def test_contribution_not_found(self) -> None:
        err = ContributionNotFoundError(7)
        assert (err.code, err.http_status) == (3001, 404)

    def test_payout_not_found(self) -> None:
        err = PayoutNotFoundError(7)
        assert (err.code, err.http_status) == (4001, 404)

    def test_rule_not_found_names_the_key(self) -> None:
        err = RuleNotFoundError("Texas", "1-2", "Full House")
        assert (err.code, err.http_status) == (4002, 404)
        assert "Texas" in err.message
        assert "1-2" in err.message
        assert "Full House" in err.message

    def test_storage_error(self) -> None:
        err = StorageError()
        assert (err.code, err.http_status) == (9001, 503)

    def test_internal_error(self) -> None:
        err = InternalError()
        assert (err.code, err.http_status) == (9002, 500)

    def test_codes_are_distinct(self) -> None:
        errors = [
            InvalidRequestError("x"),
            NothingToUpdateError(("a",)),
            BlankFieldError("a"),
            VenueNotFoundError(1),
            ContributionNotFoundError(1),
            PayoutNotFoundError(1),
            RuleNotFoundError("Texas", "1-2", "Quadra"),
            StorageError(),
            InternalError(),
        ]
        codes = [e.code for e in errors]
        assert len(codes) == len(set(codes))


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"id": 1})
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"id": 1}

    def test_success_custom_message_and_request_id(self) -> None:
        resp = success_response(None, request_id="req_abc", message="Payout recorded")
        assert resp.message == "Payout recorded"
        assert resp.request_id == "req_abc"

    def test_error(self) -> None:
        resp = error_response(4002, "Payout rule not found")
        assert resp.code == 4002
        assert resp.message == "Payout rule not found"
        assert resp.data is None

    def test_generated_request_id(self) -> None:
        resp = ApiResponse()
        assert resp.request_id.startswith("req_")
        assert len(resp.request_id) == len("req_") + 12

    def test_serialization(self) -> None:
        d = success_response({"amount": 65}).model_dump()
        assert set(d) == {"code", "message", "data", "timestamp", "request_id"}
