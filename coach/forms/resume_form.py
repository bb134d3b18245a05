from django import forms


class ResumeForm(forms.Form):
    content = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={"rows": 30, "placeholder": "Your resume in markdown"}),
    )


class ImproveSectionForm(forms.Form):
    SECTION_CHOICES = [
        ("experience", "Experience"),
        ("education", "Education"),
        ("project", "Project"),
        ("summary", "Summary"),
    ]

    current = forms.CharField(max_length=4000)
    section_type = forms.ChoiceField(choices=SECTION_CHOICES, initial="experience")
