import os

from fastapi import FastAPI
from app.routers import friends
from app.core.logx import logger

logger.is_debug(os.getenv("DEBUG", "0") == "1")

app = FastAPI(title="Friend Profile Service")

# 注册路由
app.include_router(friends.friends_router)

# uvicorn main:app
# uvicorn main:app --reload
@app.get("/")
def root():
    return {"message": "Welcome to Friend Profile Service"}
