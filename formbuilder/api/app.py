from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi import Request
from fastapi.responses import JSONResponse
import uvicorn
import os

from formbuilder import log
from formbuilder.api import app, APP_VERSION, CLIENT_URL
from formbuilder.api.routers import forms
from formbuilder.api.lib.base_responses import successful_response, user_error

origins = [
    CLIENT_URL,
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(forms.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Turns request validation failures into a 400 with a readable message

    Args:
        request (Request): FastAPI request passed through a function
        exc (RequestValidationError): Validation failure raised while parsing the request

    Returns:
        JSONResponse: 400 response with an error message
    """
    errors = exc.errors()
    if not errors:
        return user_error(message="Invalid request")

    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    log.info(f"Rejected {request.method} {request.url.path}: {location} {first.get('msg')}")
    if not location:
        return user_error(message="Request body is required")
    return user_error(message=f"Invalid value for '{location}': {first.get('msg')}")


@app.get("/version")
async def version_info():
    return successful_response(payload={"success": True, "payload": {"version": APP_VERSION}})


@app.post("/health-status")
async def health_status():
    return successful_response(payload={"success": True})


@app.api_route("/{path_name:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
async def catch_all(request: Request, path_name: str) -> JSONResponse:
    """Route to catch all routes that are not specified

    Args:
        request (Request): FastAPI request passed through a function
        path_name (str): Path to invalid api route

    Returns:
        JsonResponse: Returns a json response with 404 error as well as request details
    """
    return JSONResponse(
        content={
            "description": "Details not found",
            "request_method": request.method,
            "path_name": path_name
        },
        status_code=404
    )


if __name__ == '__main__':
    uvicorn.run("formbuilder.api.app:app", host="0.0.0.0", port=int(os.getenv("PORT", 3001)), log_level="debug")
