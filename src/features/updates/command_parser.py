import re
from dataclasses import dataclass, field

MAX_COMMAND_LENGTH = 31
MENTION_DELIMITER = "@"

# the name must end at a mention, whitespace or the end of the text; longer names never match
__COMMAND_PATTERN = re.compile(
    rf"^/(?P<name>[A-Za-z0-9_]{{1,{MAX_COMMAND_LENGTH}}})(?:{MENTION_DELIMITER}(?P<mention>\S+))?(?=\s|\Z)",
)

MentionContext = str | bool | None


@dataclass(frozen = True)
class Command:
    name: str
    args: list[str] = field(default_factory = list)


def parse_command(text: str | None, mention: MentionContext = None) -> Command | None:
    """
    Extracts a bot command (`/name@bot arg1 arg2`) from the given message text.

    Parameters:
    text (str | None): The raw message text.
    mention (str | bool | None): The bot username that a mention must equal (case-sensitive),
        True to accept a mention of any bot, or None/False to reject any mentioned command.

    Returns:
    Command | None: The parsed command, or None when the text is not a command for this bot.
    """
    if not text:
        return None
    match = __COMMAND_PATTERN.match(text)
    if not match:
        return None
    if not __is_addressed_to_us(match.group("mention"), mention):
        return None
    # everything after the command token, split on any whitespace run
    args = text[match.end():].split()
    return Command(match.group("name"), args)


def __is_addressed_to_us(mentioned: str | None, mention: MentionContext) -> bool:
    if mentioned is None:
        return True
    if mention is True:
        return True
    if isinstance(mention, str) and mention:
        return mentioned == mention
    return False
