# Development server for the dice roller application
from dicebox_lib.main import create_app, Config
app = create_app(Config())
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
