from fastapi import APIRouter, Depends

from backend.auth.dependencies import get_current_user
from backend.models.user import User
from backend.schemas import ChatRequest, ChatResponse
from backend.services.chatbot import respond

router = APIRouter(tags=['chat'])


@router.post('/chat', response_model=ChatResponse)
def chat(data: ChatRequest, current_user: User = Depends(get_current_user)):
    del current_user
    return ChatResponse(response=respond(data.message))
