"""
Command line entry point for the YouTube Transcript Summarizer.

Runs the same two steps as the web UI, in-process: fetch the transcript,
then ask the language model for a structured summary.
"""

import argparse
import sys
from typing import Optional, Tuple

from dotenv import load_dotenv

from app.core.transcriber import TranscriptFetcher
from app.core.summarizer import TranscriptSummarizer
from app.models.schemas import VideoSummary, parse_summary
from app.utils.error_handling import SummarizerError, SummaryParseError
from app.utils.logger import logging


def summarize_youtube_video(
    url: str,
    supadata_api_key: Optional[str] = None,
    deepseek_api_key: Optional[str] = None,
    model: Optional[str] = None,
) -> Tuple[str, Optional[VideoSummary]]:
    """
    Transcribe and summarize a YouTube video.

    Args:
        url: YouTube video URL
        supadata_api_key: Transcription key overriding the configured one
        deepseek_api_key: Summarization key overriding the configured one
        model: Chat model to use for the summary

    Returns:
        (transcript text, summary or None when summarization failed)

    Raises:
        SummarizerError: if the transcript could not be fetched
    """
    logging.info(f"Fetching transcript for: {url}")
    transcript = TranscriptFetcher().fetch(url, supadata_api_key)["content"]

    try:
        raw_summary = TranscriptSummarizer(model=model).summarize(transcript, deepseek_api_key)
        summary = parse_summary(raw_summary)
    except (SummarizerError, SummaryParseError) as e:
        logging.warning(f"Summary unavailable, returning transcript only: {e}")
        summary = None

    return transcript, summary


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube Transcript Summarizer")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--model", default=None, help="Chat model for summarization")
    parser.add_argument("--supadata-key", default=None, help="Supadata API key")
    parser.add_argument("--deepseek-key", default=None, help="DeepSeek API key")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    try:
        transcript, summary = summarize_youtube_video(
            args.url, args.supadata_key, args.deepseek_key, args.model
        )
    except SummarizerError as e:
        print(f"Error: {e.message}" + (f" ({e.details})" if e.details else ""), file=sys.stderr)
        sys.exit(1)

    if summary is None:
        print("Failed to generate summary. Full transcript below.", file=sys.stderr)
    elif args.json:
        print(summary.to_json(indent=2))
        return
    else:
        print("\n" + "=" * 80)
        print(summary.title)
        print("=" * 80)
        print(summary.quick_summary)
        for point in summary.main_points:
            print(f"\n* {point.point}\n  {point.description}")
        print(f"\nKey takeaways: {summary.key_conclusions}")
        print("=" * 80)

    print(transcript)


if __name__ == "__main__":
    main()
