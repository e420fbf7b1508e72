from typing import List, Literal

from pydantic import BaseModel, PrivateAttr

ChatRole = Literal["user", "assistant"]


class ChatMessage(BaseModel):
    id: int
    role: ChatRole
    content: str


class ChatTranscript(BaseModel):
    """
    Append-only conversation for one ideation chat session.

    Ids are assigned from a counter that only moves forward; messages are
    never edited, removed or truncated.
    """
    messages: List[ChatMessage] = []
    _next_id: int = PrivateAttr(default=0)

    def append(self, role: ChatRole, content: str) -> ChatMessage:
        message = ChatMessage(id=self._next_id, role=role, content=content)
        self._next_id += 1
        self.messages.append(message)
        return message

    def __len__(self) -> int:
        return len(self.messages)
