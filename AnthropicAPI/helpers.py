from typing import Any, Dict, List

def get_id(response :Dict[str,Any]) -> str:
	'''
	Safely get id from response['id']
	'''
	return response.get('id', f"Value Error '{response}' has no id")

def get_text(response :Dict[str,List[Dict[str,str]]]) -> str:
	'''
	Safely join the text blocks of a messages response's response['content']
	'''
	content = response.get('content', None)
	if not isinstance(content, list):
		return f"Value Error '{response}' has no content"
	return ''.join(block.get('text', '') for block in content if block.get('type') == 'text')

def get_completion(response :Dict[str,str]) -> str:
	'''
	Safely get completion text from a text completions response['completion']
	'''
	return response.get('completion', f"Value Error '{response}' has no completion")

def get_stop_reason(response :Dict[str,str]) -> str:
	'''
	Safely get response['stop_reason'], or "" if there is none
	'''
	return response.get('stop_reason', None) or ""

def get_embeddings(response :Dict[str,List[Dict[str,Any]]]) -> List[Any]:
	'''
	Safely get each embedding from response['data'][i]['embedding']
	'''
	data = response.get('data', [])
	return [item.get('embedding') for item in data if isinstance(item, dict)]

def error_dict(exception:Exception) -> Dict[str,str]:
	'''Wraps an exception's description in a JSON friendly dict.'''
	return {"error": str(exception)}
