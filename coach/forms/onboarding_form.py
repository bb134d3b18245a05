from django import forms

from coach.data.industries import INDUSTRIES, INDUSTRY_BY_ID, industry_label


class OnboardingForm(forms.Form):
    """
    Onboarding answers. `cleaned_data` carries the fields update_profile expects:
    industry (combined label), experience, bio, skills (list).
    """

    industry_id = forms.ChoiceField(
        label="Industry",
        choices=[("", "Select an industry")] + [(i["id"], i["name"]) for i in INDUSTRIES],
    )
    sub_industry = forms.CharField(
        label="Specialization",
        max_length=255,
        widget=forms.TextInput(attrs={"placeholder": "Select your specialization"}),
    )
    experience = forms.IntegerField(
        label="Years of Experience",
        min_value=0,
        max_value=50,
        widget=forms.NumberInput(attrs={"min": 0, "max": 50, "placeholder": "Enter years of experience"}),
    )
    skills = forms.CharField(
        required=False,
        widget=forms.TextInput(attrs={"placeholder": "e.g., Python, JavaScript, Project Management"}),
        help_text="Separate multiple skills with commas",
    )
    bio = forms.CharField(
        label="Professional Bio",
        required=False,
        max_length=500,
        widget=forms.Textarea(attrs={"placeholder": "Tell us about your professional background...", "rows": 5}),
    )

    def clean_skills(self):
        raw = self.cleaned_data.get("skills") or ""
        return [s.strip() for s in raw.split(",") if s.strip()]

    def clean(self):
        cleaned = super().clean()
        industry_id = cleaned.get("industry_id")
        sub = (cleaned.get("sub_industry") or "").strip()
        if industry_id and sub:
            if sub not in INDUSTRY_BY_ID[industry_id]["sub_industries"]:
                self.add_error("sub_industry", "Please select a specialization for this industry.")
            else:
                cleaned["industry"] = industry_label(industry_id, sub)
        return cleaned

    def profile_fields(self):
        data = self.cleaned_data
        return {
            "industry": data["industry"],
            "experience": data["experience"],
            "bio": data.get("bio") or None,
            "skills": data.get("skills") or [],
        }
