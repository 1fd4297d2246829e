from app.models.resume import SavedResume

__all__ = ["SavedResume"]
