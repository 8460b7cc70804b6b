"""
Main entry point for the Video Summary AI application.
"""

import argparse
import json
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from app.models.schemas import VideoReference, AnalysisResult, SummaryConfig
from app.core.transcriber import TranscriptFetcher
from app.core.summarizer import TranscriptSummarizer, build_summary_config
from app.core.response_parser import parse_analysis
from app.utils.error_handling import InvalidVideoURLError, AnalysisFailedError, log_diagnostic_info
from app.utils.helpers import extract_video_id, get_timestamp
from app.config import config
from app.utils.logger import logging


def resolve_video(url: Optional[str]) -> VideoReference:
    """
    Build a VideoReference for a submitted URL.

    Raises:
        InvalidVideoURLError: the URL is empty or carries no video ID
    """
    if not url or not url.strip():
        raise InvalidVideoURLError("YouTube URL is required")

    reference = VideoReference(url=url.strip(), video_id=extract_video_id(url))
    if not reference.video_id:
        raise InvalidVideoURLError()
    return reference


def analyze_youtube_video(
    url: str,
    summary_config: Optional[SummaryConfig] = None,
    fetcher: Optional[TranscriptFetcher] = None,
) -> dict:
    """
    Process a YouTube video: extract its ID, fetch the transcript and analyze it.

    Args:
        url: YouTube video URL
        summary_config: Provider settings (built from the environment if None)
        fetcher: Transcript fetcher to use

    Returns:
        Dictionary with the video ID and the model's raw analysis text
    """
    reference = resolve_video(url)
    logging.info(f"Analyzing video {reference.video_id} from: {reference.url}")

    transcript = (fetcher or TranscriptFetcher()).fetch(reference.video_id)

    summary_config = summary_config or build_summary_config()
    try:
        summarizer = TranscriptSummarizer(summary_config)
    except ValueError as e:
        logging.error(f"Could not set up {summary_config.provider.value} backend: {str(e)}")
        raise AnalysisFailedError() from e

    analysis = summarizer.analyze(transcript.text)
    log_diagnostic_info({
        "video_id": reference.video_id,
        "provider": summary_config.provider.value,
        "transcript_chars": len(transcript.text),
        "analysis_chars": len(analysis),
    })

    return {"analysis": analysis, "video_id": reference.video_id}


def save_result(result: dict, output_file: str = None) -> Path:
    """Save an analysis to a JSON file."""
    if output_file is None:
        output_dir = Path(config.ANALYSES_DIR)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / f"{result.get('video_id', 'unknown')}_{get_timestamp()}.json"
    else:
        output_file = Path(output_file)

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(result, f, indent=2, ensure_ascii=False)

    logging.info(f"Analysis saved to: {output_file}")
    return output_file


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="Video Summary AI")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--provider", choices=["gemini", "openrouter"],
                        help="LLM provider (defaults to LLM_PROVIDER)")
    parser.add_argument("--output", help="Output file path for the analysis")
    parser.add_argument("--save", action="store_true", help="Write the analysis to the data directory")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    response = analyze_youtube_video(args.url, build_summary_config(args.provider))
    outcome = parse_analysis(response["analysis"])

    print("\n" + "=" * 80)
    if isinstance(outcome, AnalysisResult):
        result = {"video_id": response["video_id"], **outcome.to_dict()}
        print(f"Topic: {outcome.topic}")
        print("-" * 80)
        for i, point in enumerate(outcome.key_points, start=1):
            print(f"{i}. {point}")
        print("-" * 80)
        print(outcome.summary)
    else:
        result = {"video_id": response["video_id"], "raw": outcome.raw, "error": outcome.error}
        print(f"Unable to parse analysis: {outcome.error}")
        print("-" * 80)
        print(outcome.raw)
    print("=" * 80)

    if args.output or args.save:
        save_result(result, args.output)


if __name__ == "__main__":
    main()
