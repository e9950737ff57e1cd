from .chat_state import ChatState, Message, Sender

__all__ = ["ChatState", "Message", "Sender"]
