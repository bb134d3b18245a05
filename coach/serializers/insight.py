from rest_framework import serializers

from coach.models import DemandLevel, IndustryInsight, MarketOutlook


class SalaryRangeSerializer(serializers.Serializer):
    role = serializers.CharField()
    min = serializers.FloatField()
    max = serializers.FloatField()
    median = serializers.FloatField()
    location = serializers.CharField(required=False, allow_blank=True, default="")


class UpperCaseChoiceField(serializers.ChoiceField):
    """Case-insensitive choice: "high", "High " and "HIGH" all store as "HIGH"."""

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = data.strip().upper()
        return super().to_internal_value(data)


class InsightPayloadSerializer(serializers.Serializer):
    """
    Validates the generator's camelCase payload and maps it onto model fields.
    `validated_data` can be passed straight to IndustryInsight(**...).
    """
    salaryRanges = SalaryRangeSerializer(many=True, source="salary_ranges", required=False, default=list)
    growthRate = serializers.FloatField(source="growth_rate", required=False, default=0.0)
    demandLevel = UpperCaseChoiceField(choices=DemandLevel.choices, source="demand_level")
    topSkills = serializers.ListField(child=serializers.CharField(), source="top_skills", required=False, default=list)
    marketOutlook = UpperCaseChoiceField(
        choices=MarketOutlook.choices, source="market_outlook", required=False, default=MarketOutlook.NEUTRAL
    )
    keyTrends = serializers.ListField(child=serializers.CharField(), source="key_trends", required=False, default=list)
    recommendedSkills = serializers.ListField(
        child=serializers.CharField(), source="recommended_skills", required=False, default=list
    )


class IndustryInsightSerializer(serializers.ModelSerializer):
    class Meta:
        model = IndustryInsight
        fields = (
            "id", "industry", "salary_ranges", "growth_rate", "demand_level",
            "top_skills", "market_outlook", "key_trends", "recommended_skills",
            "last_updated", "next_update",
        )
