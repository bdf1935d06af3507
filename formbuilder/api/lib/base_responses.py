from fastapi.responses import JSONResponse


def is_valid_status(lower: int, higher: int, status_code: int):
    """Returns bool whether status code is valid

    Args:
        lower int: Lower limit of status code.
        higher int: Exclusive upper limit of status code.
        status_code int: Status code being checked.

    Returns:
        bool: Value between range is valid or not
    """
    return lower <= status_code < higher


def successful_response(status_code: int = 200, message: str = None, payload: dict = None) -> JSONResponse:
    """Successful response generation for api responses

    Args:
        status_code (int, optional): Status code to be sent along with the content. Defaults to 200.
        message (str, optional): Message if needed for api response. Defaults to None.
        payload (dict, optional): Fields of the response body. Defaults to None.

    Returns:
        JSONResponse: FastAPI response with status code
    """

    body = dict(payload) if payload else {}
    if message:
        body["message"] = message

    if not is_valid_status(lower=200, higher=300, status_code=status_code):
        raise ValueError(f"Invalid status code {status_code}")

    return JSONResponse(
        status_code=status_code,
        content=body
    )


def server_error(status_code: int = 500, message: str = None) -> JSONResponse:
    """Server Error response generation for api responses

    Args:
        status_code (int, optional): Status code to be sent along with the content. Defaults to 500.
        message (str, optional): Error shown to the client. Defaults to None.

    Returns:
        JSONResponse: FastAPI response with status code
    """

    if not is_valid_status(lower=500, higher=600, status_code=status_code):
        raise ValueError(f"Invalid status code {status_code}")

    return JSONResponse(
        status_code=status_code,
        content={"error": message or "Internal server error"}
    )


def user_error(status_code: int = 400, message: str = None) -> JSONResponse:
    """User Error response generation for api responses

    Args:
        status_code (int, optional): Status code to be sent along with the content. Defaults to 400.
        message (str, optional): Error shown to the client. Defaults to None.

    Returns:
        JSONResponse: FastAPI response with status code
    """

    if not is_valid_status(lower=400, higher=500, status_code=status_code):
        raise ValueError(f"Invalid status code {status_code}")

    return JSONResponse(
        status_code=status_code,
        content={"error": message or "Bad request"}
    )


def not_found(message: str = None) -> JSONResponse:
    return user_error(status_code=404, message=message or "Details not found")
