import datetime

from BackEnd.core.config import CHART_MIN_SUGGESTED_MAX

def by_date(history):
	"""Sum durations per date string, keeping first-seen date order."""
	agg = {}
	for rec in history:
		agg[rec.date] = agg.get(rec.date, 0) + rec.duration
	return agg

def total_for_date(history, date):
	"""Minutes recorded on ``date``; callers pass today's date for the running total."""
	return sum(rec.duration for rec in history if rec.date == date)

def total_minutes(history):
	return sum(rec.duration for rec in history)

def total_days_studied(history):
	"""
	Returns the number of distinct dates with study time.
	"""
	return sum(1 for minutes in by_date(history).values() if minutes > 0)

def daily_streak(history, today):
	"""
	Calculate the current daily streak - consecutive days with study sessions.
	Returns 0 if today has no study time. Non-ISO date strings are ignored.
	"""
	days = set()
	for date_str, minutes in by_date(history).items():
		if minutes <= 0:
			continue
		try:
			days.add(datetime.date.fromisoformat(date_str))
		except ValueError:
			continue

	current = datetime.date.fromisoformat(today) if isinstance(today, str) else today
	streak = 0
	while current in days:
		streak += 1
		current -= datetime.timedelta(days=1)
	return streak

def chart_series(aggregate):
	"""Return (labels, values, suggested_max) for the bar chart."""
	labels = list(aggregate.keys())
	values = [aggregate[d] for d in labels]
	# handle no-data scenario
	if not labels:
		labels = ["No Data"]
		values = [0]
	return labels, values, max(values + [CHART_MIN_SUGGESTED_MAX])
