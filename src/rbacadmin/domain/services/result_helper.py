"""Success and failure envelopes for response objects."""

from typing import TypeVar

from rbacadmin.core.exceptions import AdminError, ErrorType
from rbacadmin.infrastructure.api.schemas.result_schemas import ResultStatus, ResultVO

VO = TypeVar("VO", bound=ResultVO)


class ResultHelper:
    """Attach the result envelope to response objects."""

    def success_response(self, vo: VO) -> VO:
        """Mark a response object as successful.

        Args:
            vo: Response object; its message is left untouched.

        Returns:
            The same object, with ``result`` set to SUCCESS.
        """
        vo.result = ResultStatus.SUCCESS
        vo.error_code = None
        return vo

    def failure_response(
        self,
        error: AdminError | ErrorType,
        message: str | None = None,
    ) -> ResultVO:
        """Build a failure envelope.

        Args:
            error: The raised error, or a bare error type.
            message: Overrides the error's own message.

        Returns:
            ResultVO: Envelope with result FAILURE and the error code.
        """
        if isinstance(error, AdminError):
            error_type = error.error_type
            default_message = error.message
        else:
            error_type = error
            default_message = error.description
        return ResultVO(
            result=ResultStatus.FAILURE,
            error_code=error_type.code,
            message=message or default_message,
        )
