#!/usr/bin/env python3
"""Print the outputs of a deployed static site stack."""

import argparse
import json
import sys

import boto3  # type: ignore[import-not-found]
from botocore.exceptions import ClientError

OUTPUT_KEYS = ("Certificate", "Bucket", "DistributionId")


def get_stack_outputs(stack_name: str, region: str = "us-east-1") -> dict[str, str]:
  """Retrieve the site outputs from CloudFormation.

  Args:
    stack_name: The CDK stack name (e.g., 'StaticSite-code-adjacent-com')
    region: AWS region the stack is deployed to

  Returns:
    Dictionary with Certificate, Bucket and DistributionId
  """
  cloudformation = boto3.client("cloudformation", region_name=region)
  response = cloudformation.describe_stacks(StackName=stack_name)

  outputs = {}
  for output in response["Stacks"][0].get("Outputs", []):
    if output["OutputKey"] in OUTPUT_KEYS:
      outputs[output["OutputKey"]] = output["OutputValue"]

  return outputs


def main(argv: list[str] | None = None) -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Print the outputs of a deployed static site stack"
  )
  parser.add_argument(
    "stack_name",
    help="CDK stack name (e.g., StaticSite-code-adjacent-com)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  parser.add_argument(
    "--format",
    choices=["env", "json", "export"],
    default="env",
    help="Output format (default: env)",
  )

  args = parser.parse_args(argv)

  try:
    outputs = get_stack_outputs(args.stack_name, args.region)
  except ClientError as e:
    print(f"Error retrieving stack outputs: {e}", file=sys.stderr)
    sys.exit(1)

  if args.format == "json":
    print(json.dumps(outputs, indent=2))
  elif args.format == "export":
    for key, value in outputs.items():
      print(f"export {key}={value}")
  else:  # env format
    for key, value in outputs.items():
      print(f"{key}={value}")


if __name__ == "__main__":
  main()
