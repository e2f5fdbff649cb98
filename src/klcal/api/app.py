from fastapi import FastAPI
from klcal.api.public import router as public_router

app = FastAPI(title="klcal public api")
app.include_router(public_router)
