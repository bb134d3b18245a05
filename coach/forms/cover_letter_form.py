from django import forms


class CoverLetterForm(forms.Form):
    company_name = forms.CharField(max_length=255, widget=forms.TextInput(attrs={"placeholder": "Enter company name"}))
    job_title = forms.CharField(max_length=255, widget=forms.TextInput(attrs={"placeholder": "Enter job title"}))
    job_description = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={"rows": 8, "placeholder": "Paste the job description here"}),
    )
