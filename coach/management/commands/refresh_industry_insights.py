from django.core.management.base import BaseCommand, CommandParser

from coach.models import IndustryInsight
from coach.services.errors import InsightGenerationError
from coach.services.insight_service import refresh_insight, stale_insights


class Command(BaseCommand):
    help = "Regenerate industry insights whose next_update has passed (run weekly from cron)."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--all", action="store_true", help="Refresh every insight, stale or not.")
        parser.add_argument("--industry", help="Refresh a single industry label.")

    def handle(self, *args, **options):
        if options.get("industry"):
            queryset = IndustryInsight.objects.filter(industry=options["industry"])
        elif options.get("all"):
            queryset = IndustryInsight.objects.all()
        else:
            queryset = stale_insights()

        refreshed, failed = 0, 0
        for insight in queryset:
            try:
                refresh_insight(insight)
                refreshed += 1
                self.stdout.write(self.style.SUCCESS(f"OK • {insight.industry} → next update {insight.next_update:%Y-%m-%d}"))
            except InsightGenerationError as e:
                failed += 1
                self.stderr.write(self.style.ERROR(f"FAILED • {insight.industry}: {e}"))

        summary = f"Refreshed {refreshed} insight(s), {failed} failure(s)"
        self.stdout.write(self.style.WARNING(summary) if failed else self.style.NOTICE(summary))
