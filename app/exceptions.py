# app/exceptions.py

from typing import List


class EventSinkError(Exception):
  """All product event errors"""
  pass

class MalformedBodyError(EventSinkError):
  """Request body is not decodable JSON"""
  def __init__(self, message: str = "Invalid JSON body"):
    self.message = message
    super().__init__(self.message)

class PayloadValidationError(EventSinkError):
  """One or more ProductUpdated field constraints violated"""
  def __init__(self, details: List[str]):
    self.details = list(details)
    super().__init__("; ".join(self.details))
