import json
import logging
import shutil
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from models.enums import TaskPriority
from models.habit import MAX_GOAL, MIN_GOAL, Habit, HabitWithCompletions, MonthlyCompletion
from models.task import DayTask
from utils.datetime_utils import days_in_month
from utils.validators import is_valid_date_key, is_valid_name

logger = logging.getLogger(__name__)

DEFAULT_MAX_HABITS = 25
DEFAULT_MAX_TASKS_PER_DAY = 50


class DataManagerError(Exception):
    """Base error of the data manager"""


class NotFoundError(DataManagerError):
    pass


class ValidationError(DataManagerError):
    pass


class LimitExceededError(DataManagerError):
    pass


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _completion_key(habit_id: str, year: int, month: int) -> str:
    return f"{habit_id}:{year}:{month}"


class DataManager:
    """JSON-file store for habits, monthly completions and day tasks.

    Each collection lives in its own file under ``data_dir`` as a mapping of
    id to record. Writes go through a re-entrant lock and always rewrite the
    whole file.
    """

    def __init__(
        self,
        data_dir: str = "data",
        max_habits: int = DEFAULT_MAX_HABITS,
        max_tasks_per_day: int = DEFAULT_MAX_TASKS_PER_DAY,
    ):
        self.data_dir = Path(data_dir)
        self.habits_file = self.data_dir / "habits.json"
        self.completions_file = self.data_dir / "completions.json"
        self.tasks_file = self.data_dir / "tasks.json"
        self.max_habits = max_habits
        self.max_tasks_per_day = max_tasks_per_day
        self._lock = threading.RLock()

        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._init_files()

    def _init_files(self):
        for file_path in (self.habits_file, self.completions_file, self.tasks_file):
            if not file_path.exists():
                self._save_json(file_path, {})

    def _load_json(self, file_path: Path) -> Dict:
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as e:
            logger.error(f"❌ Corrupt data file {file_path}: {e}")
            self._backup_corrupt_file(file_path)
            return {}

        if not isinstance(data, dict):
            logger.warning(f"⚠️ Unexpected format in {file_path}, starting empty")
            return {}
        return data

    def _save_json(self, file_path: Path, data: Dict):
        tmp_path = file_path.with_suffix(".json.tmp")
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp_path.replace(file_path)

    def _backup_corrupt_file(self, file_path: Path) -> Path:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        backup_file = file_path.with_name(f"{file_path.stem}.corrupt_{timestamp}.json")
        shutil.copy2(file_path, backup_file)
        logger.warning(f"💾 Corrupt file copied to {backup_file}")
        return backup_file

    # === HABITS ===

    def _user_habit_records(self, habits: Dict, user_id: str) -> List[Dict]:
        records = [h for h in habits.values() if h.get("user_id") == user_id]
        records.sort(key=lambda h: h.get("position", 0))
        return records

    def _get_habit_record(self, habits: Dict, user_id: str, habit_id: str) -> Dict:
        record = habits.get(habit_id)
        if record is None or record.get("user_id") != user_id:
            raise NotFoundError(f"Habit {habit_id} not found")
        return record

    def get_habits(self, user_id: str) -> List[Habit]:
        """User's habits ordered by position"""
        habits = self._load_json(self.habits_file)
        return [Habit.from_dict(h) for h in self._user_habit_records(habits, user_id)]

    def get_completions(self, habit_ids: List[str], year: int, month: int) -> Dict[str, MonthlyCompletion]:
        completions = self._load_json(self.completions_file)
        result = {}
        for habit_id in habit_ids:
            record = completions.get(_completion_key(habit_id, year, month))
            if record is not None:
                result[habit_id] = MonthlyCompletion.from_dict(record)
        return result

    def get_habits_with_completions(self, user_id: str, year: int, month: int) -> List[HabitWithCompletions]:
        habits = self.get_habits(user_id)
        completions = self.get_completions([h.id for h in habits], year, month)
        return [HabitWithCompletions.join(h, completions.get(h.id)) for h in habits]

    def create_habit(self, user_id: str, name: str, icon: str = "💪", goal: int = 20) -> Habit:
        if not is_valid_name(name):
            raise ValidationError("Habit name must not be empty")

        with self._lock:
            habits = self._load_json(self.habits_file)
            existing = self._user_habit_records(habits, user_id)
            if len(existing) >= self.max_habits:
                raise LimitExceededError(f"At most {self.max_habits} habits per user")

            habit = Habit(
                id=str(uuid.uuid4()),
                user_id=user_id,
                name=name.strip(),
                icon=icon,
                goal=min(MAX_GOAL, max(MIN_GOAL, int(goal))),
                position=len(existing),
                created_at=_now_iso(),
            )
            habits[habit.id] = habit.to_dict()
            self._save_json(self.habits_file, habits)

        logger.info(f"🎯 Habit created: {habit.id} ({habit.name}) for user {user_id}")
        return habit

    def update_habit_goal(self, user_id: str, habit_id: str, goal: int) -> Habit:
        if not MIN_GOAL <= goal <= MAX_GOAL:
            raise ValidationError(f"Goal must be between {MIN_GOAL} and {MAX_GOAL}")

        with self._lock:
            habits = self._load_json(self.habits_file)
            record = self._get_habit_record(habits, user_id, habit_id)
            record["goal"] = goal
            self._save_json(self.habits_file, habits)

        return Habit.from_dict(record)

    def reorder_habits(self, user_id: str, ordered_ids: List[str]) -> List[Habit]:
        """Rewrite positions 0..n-1 following ``ordered_ids``.

        The ids must be exactly the user's habits.
        """
        with self._lock:
            habits = self._load_json(self.habits_file)
            current_ids = {h["id"] for h in self._user_habit_records(habits, user_id)}
            if len(ordered_ids) != len(current_ids) or set(ordered_ids) != current_ids:
                raise ValidationError("Reorder must list every habit exactly once")

            for position, habit_id in enumerate(ordered_ids):
                habits[habit_id]["position"] = position
            self._save_json(self.habits_file, habits)

        return self.get_habits(user_id)

    def move_habit(self, user_id: str, habit_id: str, target_id: str) -> List[Habit]:
        """Drop ``habit_id`` at the place of ``target_id``; the rest shift by one."""
        with self._lock:
            ordered = [h.id for h in self.get_habits(user_id)]
            if habit_id not in ordered:
                raise NotFoundError(f"Habit {habit_id} not found")
            if target_id not in ordered:
                raise NotFoundError(f"Habit {target_id} not found")
            if habit_id == target_id:
                return self.get_habits(user_id)

            target_index = ordered.index(target_id)
            ordered.remove(habit_id)
            ordered.insert(target_index, habit_id)
            return self.reorder_habits(user_id, ordered)

    def delete_habit(self, user_id: str, habit_id: str) -> None:
        with self._lock:
            habits = self._load_json(self.habits_file)
            self._get_habit_record(habits, user_id, habit_id)
            del habits[habit_id]

            completions = self._load_json(self.completions_file)
            stale = [key for key, c in completions.items() if c.get("habit_id") == habit_id]
            for key in stale:
                del completions[key]

            self._save_json(self.habits_file, habits)
            self._save_json(self.completions_file, completions)

        logger.info(f"🗑️ Habit deleted: {habit_id} ({len(stale)} monthly records removed)")

    def toggle_completion(self, user_id: str, habit_id: str, year: int, month: int, day_index: int) -> MonthlyCompletion:
        """Flip one day of a habit, creating or updating its monthly record."""
        if not 0 <= month <= 11:
            raise ValidationError("Month must be between 0 and 11")
        month_days = days_in_month(year, month)
        if not 0 <= day_index < month_days:
            raise ValidationError(f"Day index must be between 0 and {month_days - 1}")

        with self._lock:
            habits = self._load_json(self.habits_file)
            self._get_habit_record(habits, user_id, habit_id)

            completions = self._load_json(self.completions_file)
            key = _completion_key(habit_id, year, month)
            record = completions.get(key) or MonthlyCompletion(habit_id, year, month).to_dict()

            flags = list(record.get("completions", []))
            while len(flags) <= day_index:
                flags.append(False)
            flags[day_index] = not flags[day_index]
            record["completions"] = flags

            completions[key] = record
            self._save_json(self.completions_file, completions)

        return MonthlyCompletion.from_dict(record)

    # === TASKS ===

    def _get_task_record(self, tasks: Dict, user_id: str, task_id: str) -> Dict:
        record = tasks.get(task_id)
        if record is None or record.get("user_id") != user_id:
            raise NotFoundError(f"Task {task_id} not found")
        return record

    def get_tasks(self, user_id: str, start_key: Optional[str] = None, end_key: Optional[str] = None) -> List[DayTask]:
        """User's tasks with ``start_key <= date <= end_key``, ordered by date"""
        tasks = self._load_json(self.tasks_file)
        result = []
        for record in tasks.values():
            if record.get("user_id") != user_id:
                continue
            date_key = record.get("date", "")
            if start_key and date_key < start_key:
                continue
            if end_key and date_key > end_key:
                continue
            result.append(DayTask.from_dict(record))
        result.sort(key=lambda t: t.date)
        return result

    def create_task(self, user_id: str, name: str, date: str, priority: str = TaskPriority.MEDIUM.value) -> DayTask:
        if not is_valid_name(name):
            raise ValidationError("Task name must not be empty")
        if not is_valid_date_key(date):
            raise ValidationError(f"Invalid date: {date}")
        try:
            priority = TaskPriority(priority).value
        except ValueError:
            raise ValidationError(f"Unknown priority: {priority}") from None

        with self._lock:
            tasks = self._load_json(self.tasks_file)
            same_day = [
                t for t in tasks.values()
                if t.get("user_id") == user_id and t.get("date") == date
            ]
            if len(same_day) >= self.max_tasks_per_day:
                raise LimitExceededError(f"At most {self.max_tasks_per_day} tasks per day")

            task = DayTask(
                id=str(uuid.uuid4()),
                user_id=user_id,
                name=name.strip(),
                date=date,
                priority=priority,
                completed=False,
                created_at=_now_iso(),
            )
            tasks[task.id] = task.to_dict()
            self._save_json(self.tasks_file, tasks)

        logger.info(f"📝 Task created: {task.id} on {task.date} for user {user_id}")
        return task

    def toggle_task(self, user_id: str, task_id: str) -> DayTask:
        with self._lock:
            tasks = self._load_json(self.tasks_file)
            record = self._get_task_record(tasks, user_id, task_id)
            record["completed"] = not record.get("completed", False)
            self._save_json(self.tasks_file, tasks)

        return DayTask.from_dict(record)

    def delete_task(self, user_id: str, task_id: str) -> None:
        with self._lock:
            tasks = self._load_json(self.tasks_file)
            self._get_task_record(tasks, user_id, task_id)
            del tasks[task_id]
            self._save_json(self.tasks_file, tasks)

        logger.info(f"🗑️ Task deleted: {task_id}")

    # === SUMMARY ===

    def get_counts(self) -> Dict[str, int]:
        """Record counts across all users, logged at startup and reported by health"""
        return {
            "habits": len(self._load_json(self.habits_file)),
            "completions": len(self._load_json(self.completions_file)),
            "tasks": len(self._load_json(self.tasks_file)),
        }
