import functools
from typing import Callable

from chalice import Response

from chalicelib.constants.status_codes import http400, http404, http500
from chalicelib.utils.exceptions import ValidationException, RecordNotFound, PersistenceException
from chalicelib.utils.logger import logger, log_exception

INTERNAL_ERROR_MESSAGE = 'Internal server error'


def success_response(data=None, message: str = None, status_code: int = 200) -> Response:
    body = {'success': True}
    if message is not None:
        body['message'] = message
    if data is not None:
        body['data'] = data
    return Response(body=body, status_code=status_code, headers={'Content-Type': 'application/json'})


def error_response(error: Exception, msg: str = "", status_code: int = 400, public_message: str = None,
                   *args, **kwargs):
    log_exception(error=error, msg=msg, status_code=status_code, *args, **kwargs)
    return Response(
        body={
            'success': False,
            'error': public_message or str(error),
            'exception': error.__class__.__name__,
            'error_id': getattr(logger, 'current_request_id', None)
        },
        status_code=status_code,
        headers={'Content-Type': 'application/json'}
    )


def request_exception_handler(func: Callable):
    @functools.wraps(func)
    def result(*args, **kwargs):
        try:
            logger.info(f'Calling function {func.__name__}')
            return func(*args, **kwargs)
        except ValidationException as validation_error:
            return error_response(
                error=validation_error,
                msg=f'function = {func.__name__} , error = {validation_error}',
                status_code=http400)
        except RecordNotFound as not_found:
            return error_response(
                error=not_found,
                msg=f'function = {func.__name__} , error = {not_found}',
                status_code=http404)
        except PersistenceException as persistence_error:
            return error_response(
                error=persistence_error,
                msg=f'function = {func.__name__} , error = {persistence_error}',
                status_code=http500)
        except Exception as exception:
            return error_response(
                error=exception,
                msg=f'function = {func.__name__}, error = {exception}',
                status_code=http500,
                public_message=INTERNAL_ERROR_MESSAGE)
    return result


def log_start_finish(func: Callable):
    @functools.wraps(func)
    def result(*args, **kwargs):
        logger.info(f'{func.__name__} ::: started')
        response = func(*args, **kwargs)
        logger.info(f'{func.__name__} ::: finished')
        return response
    return result
