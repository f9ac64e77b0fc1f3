"""
TASKNOTE - User-facing Messages
===============================
Error messages, usage text and the help listing shown to the user.
"""

MESSAGE_WELCOME = "Hello! I'm TaskNote. What can I do for you?"
MESSAGE_GOODBYE = "Bye. Hope to see you again soon!"

MESSAGE_EMPTY_COMMAND = "Empty command!"
MESSAGE_UNKNOWN_COMMAND = "Unknown command '{word}'!"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format!"
MESSAGE_INVALID_TASK_FORMAT = "Invalid task format!"
MESSAGE_INVALID_DESCRIPTION = "Task description must be non-empty and must not contain '|' or line breaks!"

MESSAGE_INVALID_TASK_NUMBERS_FORMAT = "Invalid task number argument format! '{token}'"
MESSAGE_MISSING_TASK_NUMBERS = "At least one task number is required!"
MESSAGE_INVALID_TASK_NUMBER = "Invalid task number 'Task not found'!"
MESSAGE_INVALID_TASK_NUMBER_HELP = "Use 'list' to see the valid task numbers."

MESSAGE_INVALID_DATETIME_FORMAT = "Invalid datetime argument format!"
MESSAGE_INVALID_DATETIME_RANGE = "Invalid datetime range! '{start}' is not before '{end}'!"

MESSAGE_INVALID_SORT_FIELD = "Invalid sort field '{value}'!"
MESSAGE_INVALID_SORT_ORDER = "Invalid sort order '{value}'!"
MESSAGE_INVALID_PRIORITY = "Invalid priority '{value}'!"

MESSAGE_DUPLICATE_TASK = "Task already exists in the list!"
MESSAGE_DUPLICATE_TASK_HELP = "Use 'find' to locate the existing task."

MESSAGE_INVALID_TASK_ENCODED_FORMAT = "Invalid encoded task content!"
MESSAGE_INVALID_DEADLINE_ENCODED = "Deadline task missing 'by' information!"
MESSAGE_INVALID_EVENT_ENCODED = "Event task missing 'from' or 'to' information!"

MESSAGE_CREATE_FILE_ERROR = "Error while creating folder or file!"
MESSAGE_READ_FILE_ERROR = "Error while reading from file!"
MESSAGE_WRITE_FILE_ERROR = "Error while writing to file!"
MESSAGE_FILE_PATH_ERROR = "Storage file should end with '.txt'"
MESSAGE_FILE_CONTENT_HELP = "Fix or remove the line, then restart."
MESSAGE_EMPTY_START_NOTICE = "Starting with an empty task list. The next change will replace the task file."

MESSAGE_TASK_LIST_TIPS = "Tip: use the task number shown above with mark, unmark, delete or update-priority."

MESSAGE_AVAILABLE_COMMANDS = """Available commands:
  list            - Lists all tasks.
  list /on        - Lists tasks on a specific date.
  find            - Finds tasks by keyword(s).
  todo            - Adds a Todo task.
  deadline        - Adds a Deadline task.
  event           - Adds an Event task.
  delete          - Deletes task(s).
  mark            - Marks task(s) as done.
  unmark          - Unmarks task(s) as not done.
  sort            - Sorts tasks by type, priority, or datetime.
  update-priority - Updates the priority of a task.
  help            - Displays this help message.
  bye             - Exits the program.

Tip: type a command name on its own (e.g. 'todo', 'delete') to see its usage."""

# ========================================
# USAGE TEXT
# ========================================

USAGE_TODO = """todo {description}
  Example:
    todo read book"""

USAGE_DEADLINE = """deadline {description} /by {datetime}
  Example:
    deadline return book /by 2024-12-01 1800
  Accepted datetime formats: YYYY-MM-DD HHMM, YYYY-MM-DD HH:MM, YYYY-MM-DD, DD/MM/YYYY HHMM, DD/MM/YYYY"""

USAGE_EVENT = """event {description} /from {datetime} /to {datetime}
  Example:
    event project meeting /from 2024-12-01 1400 /to 2024-12-01 1600
  Constraints:
    - '/from' and '/to' may be given in either order.
    - The start must be before the end."""

USAGE_LIST_ON = """list /on {date}
  Example:
    list /on 2024-12-01"""

USAGE_FIND = """find {keyword}[,{keyword}...]
  Example:
    find report, assignment
  Constraints:
    - Multiple keywords are separated by commas.
    - At least one keyword must be specified."""

USAGE_TASK_NUMBERS = """{command} {{task-number}}[,{{task-number}}...]
  Example:
    {command} 1
    {command} 1,3,5
  Constraints:
    - Task numbers must be positive integers that exist in the list.
    - Duplicate task numbers are ignored."""

USAGE_SORT = """sort /by {priority|tasktype|datetime} /order {asc|desc}
  Example:
    sort /by datetime /order asc
  Constraints:
    - '/by' and '/order' may be given in either order.
    - Todo tasks have no datetime and always come last in a datetime sort."""

USAGE_UPDATE_PRIORITY = """update-priority {task-number} {L|M|H}
  Example:
    update-priority 2 H"""
