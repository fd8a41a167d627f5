"""
Console Tester for Chat Translit
================================

Interactive tool for manually trying the transliteration engine, the chat
lookup and the bidi reordering.

Usage:
    python console_transliterate.py

Commands:
    - Type any word to see its tokens and Hebrew variants
    - Type 'find <query>' to look the query up in the demo chat list
    - Type 'bidi <text>' to see both reorderings of mixed text
    - Type 'json <word>' to see JSON output
    - Type 'q' or 'quit' to exit
"""

import sys
from pathlib import Path

try:
    from chat_lookup import lookup_chat, transliterate
    from logging_config import setup_logging
    from models import ChatEntry
    from tools.bidi import find_bidi_runs, reverse_char_only, reverse_run_aware
except ImportError:
    sys.path.insert(0, str(Path(__file__).parent))
    from chat_lookup import lookup_chat, transliterate
    from logging_config import setup_logging
    from models import ChatEntry
    from tools.bidi import find_bidi_runs, reverse_char_only, reverse_run_aware


DEMO_CHATS = [
    ChatEntry(name="סבתא", index=0),
    ChatEntry(name="Work Team", index=1),
    ChatEntry(name="שלום כהן", index=2),
    ChatEntry(name="קום והתחל", index=3),
    ChatEntry(name="דוד לוי", index=4),
]


def print_header():
    """Print welcome header."""
    print("\n" + "=" * 60)
    print("  CHAT TRANSLIT CONSOLE TESTER")
    print("  Latin → Hebrew chat name lookup")
    print("=" * 60)
    print("\nCommands:")
    print("  <word>         - Show tokens and Hebrew variants")
    print("  find <query>   - Look up a chat in the demo list")
    print("  bidi <text>    - Show terminal reordering of text")
    print("  json <word>    - Show JSON output")
    print("  q / quit       - Exit")
    print("=" * 60 + "\n")


def show_variants(word: str):
    result = transliterate(word)

    print(f"\nNormalized: '{result.word}'")
    print(f"Tokens: {result.tokens}")
    if result.skipped:
        print(f"Skipped: {result.skipped}")
    if result.rejected:
        print("⚠️  Too many tokens - no variants generated")
        return

    print(f"\n{len(result.candidates)} variants:")
    for candidate in result.candidates:
        print(f"   {reverse_run_aware(candidate)}")


def show_lookup(query: str):
    result = lookup_chat(query, DEMO_CHATS)

    if result.found:
        print(f"\n✓ {result.display_name}  (index {result.chat.index})")
        if len(result.matches) > 1:
            others = [reverse_run_aware(m.name) for m in result.matches[1:]]
            print(f"   also matched: {others}")
    else:
        print(f"\n✗ {reverse_run_aware(result.message)}")


def show_bidi(text: str):
    runs = find_bidi_runs(text)
    print(f"\nRuns: {[(r.start, r.end) for r in runs]}")
    print(f"Run-aware:  {reverse_run_aware(text)}")
    print(f"Char-only:  {reverse_char_only(text)}")


def show_json_output(word: str):
    print(transliterate(word).model_dump_json(indent=2))


def main():
    setup_logging()
    print_header()

    while True:
        try:
            user_input = input("\n🔹 Enter word: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nGoodbye!")
            break

        if not user_input:
            continue

        lower_input = user_input.lower()

        if lower_input in ('q', 'quit', 'exit'):
            print("\nGoodbye!")
            break

        if lower_input.startswith('find '):
            query = user_input[5:].strip()
            if query:
                show_lookup(query)
            else:
                print("Usage: find <query>")
            continue

        if lower_input.startswith('bidi '):
            text = user_input[5:]
            if text.strip():
                show_bidi(text)
            else:
                print("Usage: bidi <text>")
            continue

        if lower_input.startswith('json '):
            word = user_input[5:].strip()
            if word:
                show_json_output(word)
            else:
                print("Usage: json <word>")
            continue

        show_variants(user_input)


if __name__ == "__main__":
    main()
