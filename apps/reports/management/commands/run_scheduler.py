"""
Long-running process that triggers the monthly closing.

The schedule comes from the MONTHLY_CLOSING_CRON setting (crontab syntax)
evaluated in TIME_ZONE.

Usage:
    python manage.py run_scheduler
"""

import logging

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger
from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import close_old_connections

from apps.reports.services import close_previous_month

logger = logging.getLogger(__name__)


def monthly_closing_job():
    close_old_connections()
    try:
        close_previous_month()
    finally:
        close_old_connections()


def build_scheduler():
    """Return a scheduler with the monthly closing job registered."""
    scheduler = BlockingScheduler(timezone=settings.TIME_ZONE)
    scheduler.add_job(
        monthly_closing_job,
        trigger=CronTrigger.from_crontab(settings.MONTHLY_CLOSING_CRON, timezone=settings.TIME_ZONE),
        id='monthly_closing',
        max_instances=1,
        replace_existing=True,
    )
    return scheduler


class Command(BaseCommand):
    help = 'Run the scheduler for the monthly closing job'

    def handle(self, *args, **options):
        scheduler = build_scheduler()
        self.stdout.write(f'Monthly closing scheduled with "{settings.MONTHLY_CLOSING_CRON}" ({settings.TIME_ZONE})')
        logger.info("Scheduler started")

        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")
