"""
Basic Usage Example for pronscore

This example demonstrates the simplest way to use pronscore:
1. Pick a reference phrase
2. Score a transcript against it
3. Print per-word results and tips
"""

from pronscore.core import analyze, generate_tips
from pronscore.data import get_phrase


def main():
    # Step 1: Pick a phrase from the catalogue
    phrase = get_phrase(1)
    print(f"Phrase: {phrase.text}  {phrase.ipa}\n")

    # Step 2: Score what the transcription provider heard
    transcript = "halo how r u"
    result = analyze(phrase.text, transcript)
    print(f"Heard: {transcript}")
    print(f"Accuracy: {result.accuracy}% ({result.status.value})\n")

    # Step 3: Inspect results
    for judgment in result.judgments:
        print(f"  {judgment.expected:<10} {judgment.user_said:<15} "
              f"{judgment.status.value:<8} {judgment.confidence:>3}")

    print("\nTips:")
    for tip in generate_tips(result.judgments):
        print(f"  - {tip.issue}")
        print(f"    {tip.advice}")


if __name__ == "__main__":
    main()
