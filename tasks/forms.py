from django import forms

from .models import Task


class TaskForm(forms.ModelForm):
    """Form for creating or editing a task; the author is set by the view."""

    class Meta:
        model = Task
        fields = ["title", "description"]
        labels = {
            "title": "Titre",
            "description": "Description",
        }
        widgets = {
            "description": forms.Textarea(attrs={"rows": 4}),
        }
