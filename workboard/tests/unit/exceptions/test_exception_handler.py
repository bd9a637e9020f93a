from unittest import TestCase
from unittest.mock import Mock, patch

from bson.errors import InvalidId
from django.conf import settings
from django.test import RequestFactory
from rest_framework import status
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.views import APIView

from workboard.constants.audit import AuditAction
from workboard.constants.messages import ApiErrors, AuthErrorMessages, NotificationTitles, ValidationErrors
from workboard.dto.responses.error_response import ApiErrorDetail, ApiErrorSource
from workboard.exceptions.auth_exceptions import TokenExpiredError
from workboard.exceptions.exception_handler import format_validation_errors, handle_exception
from workboard.exceptions.permission_exceptions import AdminRequiredError
from workboard.exceptions.task_exceptions import TaskNotFoundException, TaskStateConflictException
from workboard.tests.fixtures.team_member import STAFF_ID


def _authenticated_request(path: str = "/v1/tasks"):
    request = RequestFactory().post(path)
    request.user_id = STAFF_ID
    request.user_email = "sam@example.com"
    request.user_name = "Sam Staff"
    request.session_id = "session_test"
    return request


class ExceptionHandlerTests(TestCase):
    def test_returns_400_for_validation_error(self):
        error_detail = {"title": ["This field is required."]}
        exception = DRFValidationError(detail=error_detail)

        response = handle_exception(exception, {"request": RequestFactory().get("/v1/tasks")})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertDictEqual(
            response.data,
            {
                "statusCode": 400,
                "message": "This field is required.",
                "errors": [{"source": {"parameter": "title"}, "detail": "This field is required."}],
            },
        )

    def test_returns_404_with_path_source(self):
        task_id = "672f7c5b775ee9f4471ff1aa"
        exception = TaskNotFoundException(task_id)

        response = handle_exception(exception, {"request": None, "kwargs": {"task_id": task_id}})

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], ApiErrors.TASK_NOT_FOUND.format(task_id))
        self.assertEqual(response.data["errors"][0]["source"], {"path": "task_id"})
        self.assertEqual(response.data["errors"][0]["title"], ApiErrors.RESOURCE_NOT_FOUND_TITLE)

    def test_returns_400_for_malformed_object_id(self):
        response = handle_exception(InvalidId("bad"), {"request": None, "kwargs": {"goal_id": "bad"}})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], ValidationErrors.INVALID_ID_FORMAT)

    def test_returns_401_for_expired_token(self):
        response = handle_exception(TokenExpiredError(), {"request": None})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["errors"][0]["title"], AuthErrorMessages.TOKEN_EXPIRED_TITLE)

    @patch("workboard.exceptions.exception_handler.get_notification_registry")
    def test_conflict_returns_409_and_notifies_member(self, mock_get_registry: Mock):
        request = _authenticated_request()
        exception = TaskStateConflictException(ApiErrors.TASK_ALREADY_ASSIGNED)

        response = handle_exception(exception, {"request": request})

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        mock_get_registry.return_value.error.assert_called_once_with(
            STAFF_ID, NotificationTitles.ERROR, ApiErrors.TASK_ALREADY_ASSIGNED
        )

    @patch("workboard.exceptions.exception_handler.get_notification_registry")
    def test_failure_title_set_by_view_is_used(self, mock_get_registry: Mock):
        request = _authenticated_request("/v1/team/auth-staff-003/terminate")
        request.failure_title = NotificationTitles.TERMINATION_FAILED

        handle_exception(TaskStateConflictException("Already terminated"), {"request": request})

        self.assertEqual(
            mock_get_registry.return_value.error.call_args.args[1], NotificationTitles.TERMINATION_FAILED
        )

    @patch("workboard.exceptions.exception_handler.get_notification_registry")
    @patch("workboard.exceptions.exception_handler.AuditService.log_auth")
    def test_permission_denied_returns_403_and_is_audited(self, mock_log_auth: Mock, mock_get_registry: Mock):
        request = _authenticated_request("/v1/team")
        exception = AdminRequiredError("create_member", request.path)

        response = handle_exception(exception, {"request": request})

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["message"], ApiErrors.ADMIN_REQUIRED)
        actor, action = mock_log_auth.call_args.args
        self.assertEqual(actor.id, STAFF_ID)
        self.assertEqual(action, AuditAction.ACCESS_DENIED)
        self.assertEqual(mock_log_auth.call_args.kwargs["details"]["path"], "/v1/team")
        mock_get_registry.return_value.error.assert_called_once_with(
            STAFF_ID, NotificationTitles.ACCESS_DENIED, ApiErrors.ADMIN_REQUIRED
        )

    @patch("workboard.exceptions.exception_handler.get_notification_registry")
    def test_validation_error_does_not_notify(self, mock_get_registry: Mock):
        handle_exception(DRFValidationError({"title": ["Required"]}), {"request": _authenticated_request()})

        mock_get_registry.assert_not_called()

    def test_custom_handler_formats_generic_exception(self):
        context = {"request": None, "view": APIView()}
        exception = Exception("A truly generic error occurred")

        with patch("workboard.exceptions.exception_handler.drf_exception_handler") as mock_drf_handler:
            mock_drf_handler.return_value = None

            with self.assertLogs("workboard.exceptions.exception_handler", level="ERROR"):
                response = handle_exception(exception, context)

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        expected_detail = str(exception) if settings.DEBUG else ApiErrors.INTERNAL_SERVER_ERROR
        self.assertEqual(response.data["message"], expected_detail)
        self.assertEqual(response.data["errors"][0]["title"], ApiErrors.UNEXPECTED_ERROR)


class FormatValidationErrorsTests(TestCase):
    def test_formats_field_errors_with_parameter_source(self):
        errors = format_validation_errors({"dueDate": ["Invalid date.", "Required."]})

        self.assertEqual(
            errors,
            [
                ApiErrorDetail(detail="Invalid date.", source={ApiErrorSource.PARAMETER: "dueDate"}),
                ApiErrorDetail(detail="Required.", source={ApiErrorSource.PARAMETER: "dueDate"}),
            ],
        )

    def test_flattens_nested_errors(self):
        errors = format_validation_errors({"actionSteps": [{"text": ["This field may not be blank."]}]})

        self.assertEqual(
            errors, [ApiErrorDetail(detail="This field may not be blank.", source={ApiErrorSource.PARAMETER: "text"})]
        )

    def test_formats_non_field_errors_list(self):
        self.assertEqual(format_validation_errors(["Broken"]), [ApiErrorDetail(detail="Broken")])
