"""
Azure Functions entry point.

The platform enforces the function key (AuthLevel.FUNCTION) before a request
reaches the FastAPI app.
"""
import azure.functions as func

from timetable_data.main import app as fastapi_app

app = func.AsgiFunctionApp(app=fastapi_app, http_auth_level=func.AuthLevel.FUNCTION)
